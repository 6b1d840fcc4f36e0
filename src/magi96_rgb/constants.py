"""Constants for Magi96 VIA/QMK communication."""

from typing import Final

# IQUNIX Magi96 USB identifiers (same pair for wired and 2.4GHz dongle)
VENDOR_ID: Final[int] = 0x320F
PRODUCT_ID: Final[int] = 0x5088

# Vendor-defined usage page of the VIA/QMK raw HID interface
RAW_HID_USAGE_PAGE: Final[int] = 0xFF60

# VIA command: set a custom (lighting) value
VIA_CUSTOM_SET_VALUE: Final[int] = 0x07

# VIA channel for the RGB matrix subsystem
CHANNEL_RGB_MATRIX: Final[int] = 0x03

# RGB matrix control IDs
RGB_MATRIX_BRIGHTNESS: Final[int] = 0x01
RGB_MATRIX_EFFECT: Final[int] = 0x02
RGB_MATRIX_EFFECT_SPEED: Final[int] = 0x03
RGB_MATRIX_COLOR: Final[int] = 0x04

# Report layout (in bytes)
REPORT_SIZE: Final[int] = 32
REPORT_ID_OFFSET: Final[int] = 0
COMMAND_OFFSET: Final[int] = 1
CHANNEL_OFFSET: Final[int] = 2
CONTROL_ID_OFFSET: Final[int] = 3
PAYLOAD_OFFSET: Final[int] = 4
MAX_PAYLOAD_SIZE: Final[int] = REPORT_SIZE - PAYLOAD_OFFSET  # 28 bytes

# Firmware value ranges (inclusive upper bounds)
MAX_BRIGHTNESS: Final[int] = 9
MAX_EFFECT_SPEED: Final[int] = 4
