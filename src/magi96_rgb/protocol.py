"""VIA/QMK report encoding for the Magi96 RGB matrix.

Every command is a single 32-byte output report:

    offset 0   report ID placeholder (always 0x00)
    offset 1   VIA command (0x07, set custom value)
    offset 2   channel (0x03, RGB matrix)
    offset 3   control ID (brightness, effect, speed, color)
    offset 4+  payload, zero padded

Functions here are pure; device I/O lives in ``magi96_rgb.device``.
"""

from magi96_rgb.constants import (
    CHANNEL_OFFSET,
    CHANNEL_RGB_MATRIX,
    COMMAND_OFFSET,
    CONTROL_ID_OFFSET,
    MAX_BRIGHTNESS,
    MAX_EFFECT_SPEED,
    MAX_PAYLOAD_SIZE,
    PAYLOAD_OFFSET,
    REPORT_ID_OFFSET,
    REPORT_SIZE,
    RGB_MATRIX_BRIGHTNESS,
    RGB_MATRIX_COLOR,
    RGB_MATRIX_EFFECT,
    RGB_MATRIX_EFFECT_SPEED,
    VIA_CUSTOM_SET_VALUE,
)
from magi96_rgb.exceptions import InvalidArgumentError, PayloadTooLargeError
from magi96_rgb.models import HsvColor, RgbEffect


def build_report(channel: int, control_id: int, payload: bytes = b"") -> bytes:
    """Build a VIA "set custom value" report.

    Args:
        channel: Firmware subsystem selector.
        control_id: Setting within the channel.
        payload: Setting data, at most 28 bytes.

    Returns:
        Exactly REPORT_SIZE bytes.

    Raises:
        PayloadTooLargeError: If the payload does not fit after the header.
    """
    if len(payload) > MAX_PAYLOAD_SIZE:
        msg = (
            f"Payload must be at most {MAX_PAYLOAD_SIZE} bytes, "
            f"got {len(payload)}"
        )
        raise PayloadTooLargeError(msg)

    report = bytearray(REPORT_SIZE)
    report[REPORT_ID_OFFSET] = 0x00
    report[COMMAND_OFFSET] = VIA_CUSTOM_SET_VALUE
    report[CHANNEL_OFFSET] = channel
    report[CONTROL_ID_OFFSET] = control_id
    report[PAYLOAD_OFFSET : PAYLOAD_OFFSET + len(payload)] = payload
    return bytes(report)


def _validate_level(name: str, value: int, maximum: int) -> int:
    # bool is an int subclass; True/False are never meant as levels
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {value!r}"
        raise InvalidArgumentError(msg)
    if not 0 <= value <= maximum:
        msg = f"{name} must be between 0 and {maximum}"
        raise InvalidArgumentError(msg)
    return value


def validate_brightness(level: int) -> int:
    """Check a brightness level (0-9).

    Raises:
        InvalidArgumentError: If the level is out of range.
    """
    return _validate_level("Brightness", level, MAX_BRIGHTNESS)


def validate_speed(speed: int) -> int:
    """Check an effect speed (0-4).

    Raises:
        InvalidArgumentError: If the speed is out of range.
    """
    return _validate_level("Speed", speed, MAX_EFFECT_SPEED)


def brightness_report(level: int) -> bytes:
    """Report setting RGB matrix brightness."""
    validate_brightness(level)
    return build_report(CHANNEL_RGB_MATRIX, RGB_MATRIX_BRIGHTNESS, bytes([level]))


def effect_report(effect: RgbEffect) -> bytes:
    """Report selecting an RGB matrix effect.

    Plain integer codes are accepted if they name a known effect.

    Raises:
        InvalidArgumentError: If the effect code is unknown.
    """
    if isinstance(effect, bool) or not isinstance(effect, int):
        msg = f"Effect must be an RgbEffect, got {effect!r}"
        raise InvalidArgumentError(msg)
    try:
        effect = RgbEffect(effect)
    except ValueError:
        msg = f"Unknown effect code {effect}"
        raise InvalidArgumentError(msg) from None
    return build_report(CHANNEL_RGB_MATRIX, RGB_MATRIX_EFFECT, bytes([effect.value]))


def effect_speed_report(speed: int) -> bytes:
    """Report setting the effect animation speed."""
    validate_speed(speed)
    return build_report(CHANNEL_RGB_MATRIX, RGB_MATRIX_EFFECT_SPEED, bytes([speed]))


def color_report(color: HsvColor) -> bytes:
    """Report setting the effect color (HSV)."""
    return build_report(CHANNEL_RGB_MATRIX, RGB_MATRIX_COLOR, color.to_bytes())
