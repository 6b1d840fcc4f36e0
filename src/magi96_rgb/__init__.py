"""Magi96 RGB - Control the IQUNIX Magi96 keyboard backlight.

This package speaks the VIA/QMK raw HID protocol to set brightness,
effect, effect speed and color of the keyboard's RGB matrix.

Example:
    from magi96_rgb import HsvColor, RgbEffect, open_device

    with open_device() as device:
        device.set_effect(RgbEffect.WAVE)
        device.set_color(HsvColor(170, 255, 255))
"""

from magi96_rgb.constants import (
    PRODUCT_ID,
    RAW_HID_USAGE_PAGE,
    REPORT_SIZE,
    VENDOR_ID,
)
from magi96_rgb.device import (
    Magi96Device,
    enumerate_interfaces,
    find_device_info,
    open_device,
    select_interface,
)
from magi96_rgb.exceptions import (
    DeviceCommunicationError,
    DeviceNotFoundError,
    InvalidArgumentError,
    Magi96Error,
    OpenFailedError,
    PayloadTooLargeError,
    ShortWriteError,
    WriteFailedError,
)
from magi96_rgb.models import (
    HsvColor,
    InterfaceInfo,
    RgbEffect,
    all_effects,
    lookup_effect,
)
from magi96_rgb.protocol import build_report

__version__ = "0.1.0"

__all__ = [
    "PRODUCT_ID",
    "RAW_HID_USAGE_PAGE",
    "REPORT_SIZE",
    "VENDOR_ID",
    "DeviceCommunicationError",
    "DeviceNotFoundError",
    "HsvColor",
    "InterfaceInfo",
    "InvalidArgumentError",
    "Magi96Device",
    "Magi96Error",
    "OpenFailedError",
    "PayloadTooLargeError",
    "RgbEffect",
    "ShortWriteError",
    "WriteFailedError",
    "__version__",
    "all_effects",
    "build_report",
    "enumerate_interfaces",
    "find_device_info",
    "lookup_effect",
    "open_device",
    "select_interface",
]
