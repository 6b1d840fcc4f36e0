"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_device_info() -> dict:
    """Create mock device info for the VIA interface (hidapi format)."""
    return {
        "path": b"/dev/hidraw3",
        "vendor_id": 0x320F,
        "product_id": 0x5088,
        "serial_number": "",
        "release_number": 0x0100,
        "manufacturer_string": "IQUNIX",
        "product_string": "Magi96",
        "usage_page": 0xFF60,
        "usage": 0x61,
        "interface_number": 1,
    }


@pytest.fixture
def keyboard_interfaces(mock_device_info: dict) -> list[dict]:
    """All interfaces the keyboard exposes: keyboard, consumer control, VIA."""
    keyboard = {
        **mock_device_info,
        "path": b"/dev/hidraw1",
        "usage_page": 0x0001,
        "usage": 0x06,
        "interface_number": 0,
    }
    consumer = {
        **mock_device_info,
        "path": b"/dev/hidraw2",
        "usage_page": 0x000C,
        "usage": 0x01,
        "interface_number": 2,
    }
    return [keyboard, consumer, mock_device_info]


@pytest.fixture
def mock_hid_device() -> MagicMock:
    """Create a mock hid.device object."""
    device = MagicMock()
    device.open_path = MagicMock()
    device.close = MagicMock()
    device.write = MagicMock(return_value=32)  # Full report accepted
    device.get_manufacturer_string = MagicMock(return_value="IQUNIX")
    device.get_product_string = MagicMock(return_value="Magi96")
    device.get_serial_number_string = MagicMock(return_value="A1B2C3")
    return device
