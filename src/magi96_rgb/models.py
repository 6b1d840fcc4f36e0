"""Data models for magi96-rgb."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Self

from magi96_rgb.constants import PRODUCT_ID, RAW_HID_USAGE_PAGE, VENDOR_ID
from magi96_rgb.exceptions import InvalidArgumentError

UNKNOWN = "Unknown"


class RgbEffect(IntEnum):
    """RGB matrix effects supported by the Magi96 firmware.

    Values are the firmware effect codes sent on the wire.
    """

    OFF = 0
    WAVE = 1
    COLOUR_CLOUD = 2
    VORTEX = 3
    MIX_COLOUR = 4
    BREATHE = 5
    LIGHT = 6
    SLOWLY_OFF = 7
    STONE = 8
    LASER = 9
    STARRY = 10
    FLOWERS_OPEN = 11
    TRAVERSE = 12
    WAVE_BAR = 13
    METEOR = 14
    RAIN = 15
    SCAN = 16
    TRIGGER_COLOUR = 17
    CENTER_SPREAD = 18

    @property
    def display_name(self) -> str:
        """Human-readable effect name."""
        return _DISPLAY_NAMES[self]

    @property
    def identifier(self) -> str:
        """Lowercase identifier, e.g. ``colourcloud``."""
        return self.name.replace("_", "").lower()

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: dict[RgbEffect, str] = {
    RgbEffect.OFF: "Off",
    RgbEffect.WAVE: "Wave",
    RgbEffect.COLOUR_CLOUD: "Colour Cloud",
    RgbEffect.VORTEX: "Vortex",
    RgbEffect.MIX_COLOUR: "Mix Colour",
    RgbEffect.BREATHE: "Breathe",
    RgbEffect.LIGHT: "Light",
    RgbEffect.SLOWLY_OFF: "Slowly Off",
    RgbEffect.STONE: "Stone",
    RgbEffect.LASER: "Laser",
    RgbEffect.STARRY: "Starry",
    RgbEffect.FLOWERS_OPEN: "Flowers Open",
    RgbEffect.TRAVERSE: "Traverse",
    RgbEffect.WAVE_BAR: "Wave Bar",
    RgbEffect.METEOR: "Meteor",
    RgbEffect.RAIN: "Rain",
    RgbEffect.SCAN: "Scan",
    RgbEffect.TRIGGER_COLOUR: "Trigger Colour",
    RgbEffect.CENTER_SPREAD: "Center Spread",
}

# US spellings accepted in addition to the firmware's UK names
_US_ALIASES: dict[RgbEffect, tuple[str, ...]] = {
    RgbEffect.COLOUR_CLOUD: ("color_cloud",),
    RgbEffect.MIX_COLOUR: ("mix_color",),
    RgbEffect.TRIGGER_COLOUR: ("trigger_color",),
}


def _build_alias_table() -> dict[str, RgbEffect]:
    """Map every accepted lowercase alias to its effect."""
    table: dict[str, RgbEffect] = {}
    for effect in RgbEffect:
        table[effect.identifier] = effect
        table[effect.name.lower()] = effect
        for alias in _US_ALIASES.get(effect, ()):
            table[alias] = effect
    return table


EFFECT_ALIASES: dict[str, RgbEffect] = _build_alias_table()

_ALL_EFFECTS: tuple[RgbEffect, ...] = tuple(sorted(RgbEffect))


def lookup_effect(name: str) -> RgbEffect | None:
    """Find an effect by name, ignoring case.

    Args:
        name: Effect alias such as ``wave``, ``ColourCloud`` or ``mix_color``.

    Returns:
        The matching effect, or None if the name is not a known alias.
    """
    return EFFECT_ALIASES.get(name.strip().lower())


def all_effects() -> tuple[RgbEffect, ...]:
    """Return every effect in ascending code order."""
    return _ALL_EFFECTS


@dataclass(frozen=True, slots=True)
class HsvColor:
    """HSV color as the firmware expects it, each component 0-255."""

    hue: int
    saturation: int
    value: int

    def __post_init__(self) -> None:
        for name in ("hue", "saturation", "value"):
            component = getattr(self, name)
            if isinstance(component, bool) or not isinstance(component, int):
                msg = f"{name} must be an integer, got {component!r}"
                raise InvalidArgumentError(msg)
            if not 0 <= component <= 0xFF:
                msg = f"{name} must be between 0 and 255, got {component}"
                raise InvalidArgumentError(msg)

    def to_bytes(self) -> bytes:
        """Encode as three bytes: hue, saturation, value."""
        return bytes((self.hue, self.saturation, self.value))


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Descriptor strings reported by the OS for an open interface."""

    manufacturer: str | None = None
    product: str | None = None
    serial: str | None = None


def format_device_info(info: DeviceInfo) -> str:
    """Render device info as three lines, using "Unknown" for missing fields."""
    return "\n".join(
        (
            f"Manufacturer: {info.manufacturer or UNKNOWN}",
            f"Product: {info.product or UNKNOWN}",
            f"Serial: {info.serial or UNKNOWN}",
        )
    )


@dataclass(frozen=True, slots=True)
class InterfaceInfo:
    """One HID interface as reported by hidapi enumeration."""

    path: bytes
    vendor_id: int
    product_id: int
    interface_number: int
    usage_page: int
    usage: int
    release_number: int = 0
    manufacturer: str | None = None
    product: str | None = None
    serial: str | None = None

    @classmethod
    def from_hid(cls, dev_info: dict[str, Any]) -> Self:
        """Build from a hidapi device info dictionary."""
        return cls(
            path=dev_info.get("path", b""),
            vendor_id=dev_info.get("vendor_id", 0),
            product_id=dev_info.get("product_id", 0),
            interface_number=dev_info.get("interface_number", -1),
            usage_page=dev_info.get("usage_page", 0),
            usage=dev_info.get("usage", 0),
            release_number=dev_info.get("release_number", 0),
            manufacturer=dev_info.get("manufacturer_string") or None,
            product=dev_info.get("product_string") or None,
            serial=dev_info.get("serial_number") or None,
        )

    @property
    def is_control_interface(self) -> bool:
        """True for the keyboard's VIA raw HID interface."""
        return (
            self.vendor_id == VENDOR_ID
            and self.product_id == PRODUCT_ID
            and self.usage_page == RAW_HID_USAGE_PAGE
        )


def format_interface(index: int, iface: InterfaceInfo) -> str:
    """Render one enumerated interface as an indented block."""
    marker = " [VIA]" if iface.is_control_interface else ""
    path = (
        iface.path.decode(errors="replace")
        if isinstance(iface.path, bytes)
        else str(iface.path)
    )
    return "\n".join(
        (
            f"Interface #{index}:{marker}",
            f"  Path: {path}",
            f"  Manufacturer: {iface.manufacturer or UNKNOWN}",
            f"  Product: {iface.product or UNKNOWN}",
            f"  Serial: {iface.serial or UNKNOWN}",
            f"  Release: {iface.release_number:04X}",
            f"  Interface: {iface.interface_number}",
            f"  Usage Page: 0x{iface.usage_page:04X}",
            f"  Usage: 0x{iface.usage:04X}",
        )
    )
