"""Custom exceptions for Magi96 RGB control."""


class Magi96Error(Exception):
    """Base exception for Magi96 RGB errors."""


class DeviceNotFoundError(Magi96Error):
    """Raised when the keyboard's VIA interface cannot be found."""

    def __init__(
        self,
        message: str = (
            "Failed to find VIA interface for Magi96 keyboard. "
            "Is it connected in 2.4GHz or wired mode? "
            "(Bluetooth does not expose the configuration interface.)"
        ),
    ) -> None:
        super().__init__(message)


class OpenFailedError(Magi96Error):
    """Raised when the VIA interface exists but cannot be opened."""


class InvalidArgumentError(Magi96Error, ValueError):
    """Raised when a setting value is outside the firmware's range."""


class PayloadTooLargeError(Magi96Error, ValueError):
    """Raised when a command payload does not fit in one report."""


class DeviceCommunicationError(Magi96Error):
    """Raised when communication with an open device fails."""


class WriteFailedError(DeviceCommunicationError):
    """Raised when the OS rejects a report write."""


class ShortWriteError(DeviceCommunicationError):
    """Raised when the device accepts fewer bytes than the report size."""

    def __init__(self, expected: int, written: int) -> None:
        self.expected = expected
        self.written = written
        super().__init__(
            f"Incomplete HID write: expected {expected} bytes, wrote {written}"
        )
