"""Device detection and management for the Magi96 keyboard."""

import logging
from collections.abc import Iterable
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Self

import hid

from magi96_rgb.constants import (
    PRODUCT_ID,
    RAW_HID_USAGE_PAGE,
    REPORT_SIZE,
    VENDOR_ID,
)
from magi96_rgb.exceptions import (
    DeviceCommunicationError,
    DeviceNotFoundError,
    OpenFailedError,
    ShortWriteError,
    WriteFailedError,
)
from magi96_rgb.models import (
    DeviceInfo,
    HsvColor,
    InterfaceInfo,
    RgbEffect,
    format_device_info,
)
from magi96_rgb.protocol import (
    brightness_report,
    build_report,
    color_report,
    effect_report,
    effect_speed_report,
)

if TYPE_CHECKING:
    from collections.abc import Generator

logger = logging.getLogger(__name__)


def select_interface(interfaces: Iterable[dict[str, Any]]) -> dict[str, Any] | None:
    """Pick the VIA raw HID interface from a list of hidapi descriptors.

    The keyboard exposes several interfaces under the same VID/PID
    (keyboard, consumer control, ...). Only the one on the vendor-defined
    usage page 0xFF60 accepts VIA reports.

    Args:
        interfaces: Device info dictionaries as returned by ``hid.enumerate``.

    Returns:
        The first matching descriptor, or None if there is none.
    """
    for dev_info in interfaces:
        if dev_info.get("vendor_id") != VENDOR_ID:
            continue
        if dev_info.get("product_id") != PRODUCT_ID:
            continue
        if dev_info.get("usage_page") != RAW_HID_USAGE_PAGE:
            continue
        return dev_info
    return None


def enumerate_interfaces() -> list[InterfaceInfo]:
    """List every HID interface exposed by the Magi96 keyboard."""
    return [
        InterfaceInfo.from_hid(dev_info)
        for dev_info in hid.enumerate(VENDOR_ID, PRODUCT_ID)
    ]


def find_device_info() -> dict[str, Any]:
    """Find the Magi96 VIA interface.

    Returns:
        Device info dictionary from hidapi.

    Raises:
        DeviceNotFoundError: If no interface matches VID, PID and usage page.
    """
    devices: list[dict[str, Any]] = hid.enumerate(VENDOR_ID, PRODUCT_ID)
    logger.debug(
        "hidapi reported %d interface(s) for %04X:%04X",
        len(devices),
        VENDOR_ID,
        PRODUCT_ID,
    )
    dev_info = select_interface(devices)
    if dev_info is None:
        raise DeviceNotFoundError
    logger.debug("Selected VIA interface %r", dev_info.get("path"))
    return dev_info


class Magi96Device:
    """Connection to the Magi96 VIA interface.

    Usable as a context manager; the handle is released on exit.

    Example:
        with Magi96Device() as device:
            device.set_effect(RgbEffect.WAVE)
    """

    def __init__(self) -> None:
        self._device: hid.device | None = None
        self._device_info: dict[str, Any] | None = None

    def __enter__(self) -> Self:
        """Open connection to the device."""
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Close connection to the device."""
        self.close()

    @property
    def is_open(self) -> bool:
        """Whether a handle is currently held."""
        return self._device is not None

    def open(self) -> Self:
        """Locate and open the VIA interface.

        Raises:
            DeviceNotFoundError: If the interface is not present.
            OpenFailedError: If the OS refuses to open it.
            DeviceCommunicationError: If this instance is already open.
        """
        if self._device is not None:
            msg = "Device already opened"
            raise DeviceCommunicationError(msg)
        self._device_info = find_device_info()
        device = hid.device()
        try:
            device.open_path(self._device_info["path"])
        except OSError as e:
            msg = f"Failed to open VIA interface: {e}"
            raise OpenFailedError(msg) from e
        self._device = device
        return self

    def close(self) -> None:
        """Release the device handle."""
        if self._device is not None:
            try:
                self._device.close()
            finally:
                self._device = None

    def send_command(
        self, channel: int, control_id: int, payload: bytes = b""
    ) -> None:
        """Send one VIA "set custom value" command.

        Args:
            channel: Firmware subsystem selector.
            control_id: Setting within the channel.
            payload: Setting data, at most 28 bytes.

        Raises:
            PayloadTooLargeError: If the payload does not fit in a report.
            DeviceCommunicationError: If the write fails or is incomplete.
        """
        self._write_report(build_report(channel, control_id, payload))

    def set_brightness(self, brightness: int) -> None:
        """Set RGB backlight brightness (0-9)."""
        self._write_report(brightness_report(brightness))

    def set_effect(self, effect: RgbEffect) -> None:
        """Select the RGB effect."""
        self._write_report(effect_report(effect))

    def set_effect_speed(self, speed: int) -> None:
        """Set effect speed (0-4, 0 is slowest)."""
        self._write_report(effect_speed_report(speed))

    def set_color(self, color: HsvColor) -> None:
        """Set the effect color."""
        self._write_report(color_report(color))

    def get_device_info(self) -> str:
        """Describe the open interface.

        Returns:
            Manufacturer, product and serial on three lines; fields the OS
            does not report are shown as "Unknown".

        Raises:
            DeviceCommunicationError: If the device is not open or the
                strings cannot be read.
        """
        device = self._require_open()
        try:
            info = DeviceInfo(
                manufacturer=device.get_manufacturer_string(),
                product=device.get_product_string(),
                serial=device.get_serial_number_string(),
            )
        except (OSError, ValueError) as e:
            msg = f"Failed to get device info: {e}"
            raise DeviceCommunicationError(msg) from e
        return format_device_info(info)

    def _require_open(self) -> hid.device:
        if self._device is None:
            msg = "Device not opened"
            raise DeviceCommunicationError(msg)
        return self._device

    def _write_report(self, report: bytes) -> None:
        """Write one output report to the device.

        Raises:
            WriteFailedError: If the OS write fails.
            ShortWriteError: If fewer than REPORT_SIZE bytes were written.
        """
        device = self._require_open()
        logger.debug("Writing report: %s", report.hex(" "))
        try:
            written = device.write(report)
        except (OSError, ValueError) as e:
            msg = f"Failed to write HID report: {e}"
            raise WriteFailedError(msg) from e
        if written < 0:
            msg = f"Failed to write HID report (result={written})"
            raise WriteFailedError(msg)
        if written < REPORT_SIZE:
            raise ShortWriteError(REPORT_SIZE, written)
        logger.debug("Wrote %d bytes", written)


@contextmanager
def open_device() -> "Generator[Magi96Device]":
    """Context manager for opening the Magi96 keyboard.

    Yields:
        An opened Magi96Device instance.

    Example:
        with open_device() as device:
            device.set_brightness(5)
    """
    device = Magi96Device()
    with device:
        yield device
