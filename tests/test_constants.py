"""Tests for constants module."""

from magi96_rgb.constants import (
    CHANNEL_RGB_MATRIX,
    MAX_BRIGHTNESS,
    MAX_EFFECT_SPEED,
    MAX_PAYLOAD_SIZE,
    PAYLOAD_OFFSET,
    PRODUCT_ID,
    RAW_HID_USAGE_PAGE,
    REPORT_SIZE,
    RGB_MATRIX_BRIGHTNESS,
    RGB_MATRIX_COLOR,
    RGB_MATRIX_EFFECT,
    RGB_MATRIX_EFFECT_SPEED,
    VENDOR_ID,
    VIA_CUSTOM_SET_VALUE,
)


def test_usb_ids() -> None:
    """VID/PID should identify the Magi96."""
    assert VENDOR_ID == 0x320F
    assert PRODUCT_ID == 0x5088


def test_usage_page_is_vendor_defined() -> None:
    """VIA raw HID lives on vendor-defined usage page 0xFF60."""
    assert RAW_HID_USAGE_PAGE == 0xFF60
    assert RAW_HID_USAGE_PAGE >= 0xFF00


def test_via_ids() -> None:
    """VIA command and channel IDs should match the firmware."""
    assert VIA_CUSTOM_SET_VALUE == 0x07
    assert CHANNEL_RGB_MATRIX == 0x03


def test_control_ids_are_distinct() -> None:
    """Each RGB matrix setting should have its own control ID."""
    ids = (
        RGB_MATRIX_BRIGHTNESS,
        RGB_MATRIX_EFFECT,
        RGB_MATRIX_EFFECT_SPEED,
        RGB_MATRIX_COLOR,
    )
    assert ids == (1, 2, 3, 4)


def test_report_size() -> None:
    """Report should be 32 bytes with a 28-byte payload area."""
    assert REPORT_SIZE == 32
    assert PAYLOAD_OFFSET == 4
    assert MAX_PAYLOAD_SIZE == 28


def test_value_ranges() -> None:
    """Brightness tops out at 9, speed at 4."""
    assert MAX_BRIGHTNESS == 9
    assert MAX_EFFECT_SPEED == 4
