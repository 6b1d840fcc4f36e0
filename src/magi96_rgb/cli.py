"""Command-line interface for Magi96 RGB control."""

import argparse
import logging
import sys

from magi96_rgb import __version__
from magi96_rgb.constants import (
    MAX_BRIGHTNESS,
    MAX_EFFECT_SPEED,
    PRODUCT_ID,
    VENDOR_ID,
)
from magi96_rgb.device import enumerate_interfaces, open_device
from magi96_rgb.exceptions import (
    DeviceNotFoundError,
    InvalidArgumentError,
    Magi96Error,
)
from magi96_rgb.models import (
    HsvColor,
    all_effects,
    format_interface,
    lookup_effect,
)
from magi96_rgb.protocol import validate_brightness, validate_speed

# Epilog text for main parser
MAIN_EPILOG = """\
examples:
  magi96 brightness 5          Set backlight brightness (0-9)
  magi96 effect wave           Switch to the Wave effect
  magi96 speed 2               Set effect speed (0-4)
  magi96 color 170 255 255     Set effect color as HSV
  magi96 list-effects          Show all effect names
  magi96 info                  Show keyboard manufacturer/product/serial

connection:
  The keyboard must be connected by USB cable or the 2.4GHz dongle.
  Bluetooth mode does not expose the VIA configuration interface.

Use -h with any command for detailed help.
"""

EFFECT_EPILOG = """\
examples:
  magi96 effect wave
  magi96 effect colour_cloud   (color_cloud and colourcloud also work)
  magi96 effect off

Names are case-insensitive. Run 'magi96 list-effects' for the full list.
"""

COLOR_EPILOG = """\
examples:
  magi96 color 0 255 255       Red
  magi96 color 85 255 255      Green
  magi96 color 170 255 255     Blue
  magi96 color 0 0 255         White

All components use the firmware's 0-255 scale (hue 255 wraps to red).
"""


def _byte(value: str) -> int:
    """Argparse type for a single byte (0-255)."""
    try:
        if value.lower().startswith("0x"):
            number = int(value, 16)
        else:
            number = int(value)
    except ValueError:
        msg = f"invalid integer value: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if not 0 <= number <= 0xFF:
        msg = f"must be between 0 and 255, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _error(message: object) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _device_error(e: Magi96Error) -> int:
    """Print a device-level error and return the failure exit code."""
    if isinstance(e, DeviceNotFoundError):
        _error(e)
        print("Run 'magi96 interfaces' to see what is connected.", file=sys.stderr)
        return 1
    return _error(e)


def cmd_brightness(args: argparse.Namespace) -> int:
    """Set RGB backlight brightness."""
    try:
        level = validate_brightness(args.level)
    except InvalidArgumentError as e:
        return _error(e)

    try:
        with open_device() as device:
            device.set_brightness(level)
    except Magi96Error as e:
        return _device_error(e)

    print(f"✓ Brightness set to {level}")
    return 0


def cmd_effect(args: argparse.Namespace) -> int:
    """Set the RGB effect."""
    effect = lookup_effect(args.effect)
    if effect is None:
        return _error(
            f"Unknown effect '{args.effect}'. "
            "Use 'list-effects' to see available effects."
        )

    try:
        with open_device() as device:
            device.set_effect(effect)
    except Magi96Error as e:
        return _device_error(e)

    print(f"✓ Effect set to {effect.display_name}")
    return 0


def cmd_speed(args: argparse.Namespace) -> int:
    """Set the RGB effect speed."""
    try:
        speed = validate_speed(args.speed)
    except InvalidArgumentError as e:
        return _error(e)

    try:
        with open_device() as device:
            device.set_effect_speed(speed)
    except Magi96Error as e:
        return _device_error(e)

    print(f"✓ Effect speed set to {speed}")
    return 0


def cmd_color(args: argparse.Namespace) -> int:
    """Set the RGB color from HSV components."""
    color = HsvColor(args.hue, args.saturation, args.value)

    try:
        with open_device() as device:
            device.set_color(color)
    except Magi96Error as e:
        return _device_error(e)

    print(f"✓ Color set to HSV({color.hue}, {color.saturation}, {color.value})")
    return 0


def cmd_list_effects(args: argparse.Namespace) -> int:
    """List all effects without touching the device."""
    print("Available RGB effects:")
    for index, effect in enumerate(all_effects()):
        print(f"  {index:2}. {effect.display_name} ({effect.identifier})")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show keyboard device information."""
    try:
        with open_device() as device:
            info = device.get_device_info()
    except Magi96Error as e:
        return _device_error(e)

    print("Magi96 Keyboard Information:")
    print(info)
    return 0


def cmd_interfaces(args: argparse.Namespace) -> int:
    """List every HID interface the keyboard exposes."""
    try:
        interfaces = enumerate_interfaces()
    except OSError as e:
        return _error(f"Failed to enumerate HID devices: {e}")

    print(
        "Enumerating all HID devices for Magi96 keyboard "
        f"(VID: 0x{VENDOR_ID:04X}, PID: 0x{PRODUCT_ID:04X}):"
    )
    print()
    print(f"Found {len(interfaces)} HID interface(s):")
    print()
    for index, iface in enumerate(interfaces):
        print(format_interface(index, iface))
        print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    # Use RawDescriptionHelpFormatter to preserve epilog formatting
    parser = argparse.ArgumentParser(
        prog="magi96",
        description="Driver for IQUNIX Magi96 keyboard RGB control.",
        epilog=MAIN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log HID discovery and report bytes",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="commands",
        metavar="<command>",
    )

    brightness_parser = subparsers.add_parser(
        "brightness",
        help=f"set RGB backlight brightness (0-{MAX_BRIGHTNESS})",
        description="Set the RGB matrix brightness level.",
    )
    brightness_parser.add_argument(
        "level",
        type=int,
        metavar="LEVEL",
        help=f"brightness level (0-{MAX_BRIGHTNESS})",
    )
    brightness_parser.set_defaults(func=cmd_brightness)

    effect_parser = subparsers.add_parser(
        "effect",
        help="set RGB effect",
        description="Switch the RGB matrix to a lighting effect.",
        epilog=EFFECT_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    effect_parser.add_argument(
        "effect",
        metavar="NAME",
        help="effect name (e.g. wave, breathe, vortex)",
    )
    effect_parser.set_defaults(func=cmd_effect)

    speed_parser = subparsers.add_parser(
        "speed",
        help=f"set RGB effect speed (0-{MAX_EFFECT_SPEED})",
        description="Set the animation speed of the current effect.",
    )
    speed_parser.add_argument(
        "speed",
        type=int,
        metavar="SPEED",
        help=f"speed level (0-{MAX_EFFECT_SPEED}, where 0 is slowest)",
    )
    speed_parser.set_defaults(func=cmd_speed)

    color_parser = subparsers.add_parser(
        "color",
        help="set RGB color using HSV values",
        description="Set the effect color as hue, saturation and value.",
        epilog=COLOR_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    color_parser.add_argument("hue", type=_byte, metavar="HUE", help="hue (0-255)")
    color_parser.add_argument(
        "saturation", type=_byte, metavar="SAT", help="saturation (0-255)"
    )
    color_parser.add_argument(
        "value", type=_byte, metavar="VAL", help="value/brightness (0-255)"
    )
    color_parser.set_defaults(func=cmd_color)

    list_parser = subparsers.add_parser(
        "list-effects",
        help="list all available RGB effects",
        description="Print every effect with its index and name.",
    )
    list_parser.set_defaults(func=cmd_list_effects)

    info_parser = subparsers.add_parser(
        "info",
        help="show keyboard device information",
        description="Print manufacturer, product and serial number.",
    )
    info_parser.set_defaults(func=cmd_info)

    interfaces_parser = subparsers.add_parser(
        "interfaces",
        help="list the keyboard's HID interfaces",
        description=(
            "List every HID interface exposed under the Magi96 VID/PID.\n"
            "The VIA configuration interface is marked [VIA]."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    interfaces_parser.set_defaults(func=cmd_interfaces)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        result: int = args.func(args)
    except KeyboardInterrupt:
        return 130
    return result


if __name__ == "__main__":
    sys.exit(main())
