"""Tests for CLI module."""

import argparse
from unittest.mock import MagicMock, patch

import pytest

from magi96_rgb.cli import (
    cmd_brightness,
    cmd_effect,
    cmd_list_effects,
    cmd_speed,
    main,
)
from magi96_rgb.exceptions import DeviceNotFoundError, OpenFailedError, ShortWriteError
from magi96_rgb.models import HsvColor, RgbEffect


@pytest.fixture
def mock_open_device():
    """Patch open_device in the CLI to yield a mock driver."""
    device = MagicMock()
    device.get_device_info.return_value = (
        "Manufacturer: IQUNIX\nProduct: Magi96\nSerial: Unknown"
    )
    with patch("magi96_rgb.cli.open_device") as mock_open:
        mock_open.return_value.__enter__ = MagicMock(return_value=device)
        mock_open.return_value.__exit__ = MagicMock(return_value=False)
        yield mock_open, device


class TestCmdBrightness:
    """Tests for cmd_brightness command."""

    def test_out_of_range_does_not_open(self, mock_open_device) -> None:
        """Should return 1 for brightness 10 without opening the device."""
        mock_open, _ = mock_open_device
        result = cmd_brightness(argparse.Namespace(level=10))
        assert result == 1
        mock_open.assert_not_called()

    def test_negative(self, mock_open_device) -> None:
        """Should return 1 for negative brightness."""
        assert cmd_brightness(argparse.Namespace(level=-1)) == 1

    def test_success(self, mock_open_device, capsys: pytest.CaptureFixture) -> None:
        """Should set brightness and report it."""
        _, device = mock_open_device
        assert cmd_brightness(argparse.Namespace(level=9)) == 0
        device.set_brightness.assert_called_once_with(9)
        assert "Brightness set to 9" in capsys.readouterr().out


class TestCmdEffect:
    """Tests for cmd_effect command."""

    def test_unknown_effect(self, mock_open_device, capsys) -> None:
        """Unknown names should point at list-effects."""
        mock_open, _ = mock_open_device
        assert cmd_effect(argparse.Namespace(effect="sparkle")) == 1
        err = capsys.readouterr().err
        assert "Unknown effect 'sparkle'" in err
        assert "list-effects" in err
        mock_open.assert_not_called()

    def test_case_insensitive(self, mock_open_device, capsys) -> None:
        """Should resolve names regardless of case."""
        _, device = mock_open_device
        assert cmd_effect(argparse.Namespace(effect="Color_Cloud")) == 0
        device.set_effect.assert_called_once_with(RgbEffect.COLOUR_CLOUD)
        assert "Effect set to Colour Cloud" in capsys.readouterr().out


class TestCmdSpeed:
    """Tests for cmd_speed command."""

    def test_out_of_range(self, mock_open_device) -> None:
        """Speed 5 should be rejected."""
        assert cmd_speed(argparse.Namespace(speed=5)) == 1

    def test_top_value(self, mock_open_device) -> None:
        """Speed 4 should be accepted."""
        _, device = mock_open_device
        assert cmd_speed(argparse.Namespace(speed=4)) == 0
        device.set_effect_speed.assert_called_once_with(4)


class TestCmdListEffects:
    """Tests for cmd_list_effects command."""

    def test_lists_all_without_device(self, mock_open_device, capsys) -> None:
        """Should print all effects and never open the device."""
        mock_open, _ = mock_open_device
        assert cmd_list_effects(argparse.Namespace()) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Available RGB effects:"
        assert len(lines) == 20
        assert lines[1] == "   0. Off (off)"
        assert lines[3] == "   2. Colour Cloud (colourcloud)"
        assert lines[19] == "  18. Center Spread (centerspread)"
        mock_open.assert_not_called()


class TestMain:
    """Tests for argument parsing and dispatch."""

    def test_color(self, mock_open_device, capsys) -> None:
        """Should parse three bytes into an HsvColor."""
        _, device = mock_open_device
        assert main(["color", "10", "20", "30"]) == 0
        device.set_color.assert_called_once_with(HsvColor(10, 20, 30))
        assert "HSV(10, 20, 30)" in capsys.readouterr().out

    def test_color_leading_zero(self, mock_open_device) -> None:
        """Decimal components with leading zeros should parse as decimal."""
        _, device = mock_open_device
        assert main(["color", "085", "255", "010"]) == 0
        device.set_color.assert_called_once_with(HsvColor(85, 255, 10))

    def test_color_hex_prefix(self, mock_open_device) -> None:
        """0x-prefixed components should parse as hex."""
        _, device = mock_open_device
        assert main(["color", "0x55", "0xFF", "0"]) == 0
        device.set_color.assert_called_once_with(HsvColor(85, 255, 0))

    def test_color_out_of_byte_range(self, mock_open_device) -> None:
        """Components above 255 should be rejected by the parser."""
        with pytest.raises(SystemExit) as exc_info:
            main(["color", "256", "0", "0"])
        assert exc_info.value.code == 2

    def test_info(self, mock_open_device, capsys) -> None:
        """Should print the header and device info."""
        assert main(["info"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Magi96 Keyboard Information:\n")
        assert "Product: Magi96" in out

    def test_device_not_found(self, mock_open_device, capsys) -> None:
        """Missing keyboard should exit 1 with a hint."""
        mock_open, _ = mock_open_device
        mock_open.return_value.__enter__.side_effect = DeviceNotFoundError()
        assert main(["effect", "wave"]) == 1
        err = capsys.readouterr().err
        assert "2.4GHz or wired" in err
        assert "magi96 interfaces" in err

    def test_open_failed(self, mock_open_device, capsys) -> None:
        """Permission errors should exit 1."""
        mock_open, _ = mock_open_device
        mock_open.return_value.__enter__.side_effect = OpenFailedError("denied")
        assert main(["info"]) == 1
        assert "Error: denied" in capsys.readouterr().err

    def test_short_write(self, mock_open_device, capsys) -> None:
        """Incomplete writes should exit 1."""
        _, device = mock_open_device
        device.set_effect_speed.side_effect = ShortWriteError(32, 8)
        assert main(["speed", "2"]) == 1
        assert "expected 32 bytes, wrote 8" in capsys.readouterr().err

    def test_interfaces(self, keyboard_interfaces: list[dict], capsys) -> None:
        """Should list every interface and mark the VIA one."""
        with patch(
            "magi96_rgb.device.hid.enumerate", return_value=keyboard_interfaces
        ):
            assert main(["interfaces"]) == 0
        out = capsys.readouterr().out
        assert "Found 3 HID interface(s):" in out
        assert out.count("[VIA]") == 1
        assert "Usage Page: 0xFF60" in out

    def test_command_required(self) -> None:
        """Running without a command should be a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
