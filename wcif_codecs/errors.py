"""Central error types raised by the WCIF value codecs."""

from __future__ import annotations


class WCIFDecodeError(ValueError):
    """Base error for wire values that cannot be decoded."""


class NotANumberError(WCIFDecodeError):
    """Raised when an integer wire value is required but something else was given."""


class InvalidResultError(WCIFDecodeError):
    """Raised when an integer is outside the accepted attempt result range."""


class LengthError(WCIFDecodeError):
    """Raised when a fixed-width identifier has the wrong length."""

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(f"Invalid length {length} (expected {expected})")
        self.length = length
        self.expected = expected


class DigitParseError(WCIFDecodeError):
    """Raised when a numeric sub-token contains non-digit characters or overflows."""


class MissingEventIdError(WCIFDecodeError):
    """Raised when an activity code has no event identifier."""


class MissingRoundPrefixError(WCIFDecodeError):
    """Raised when a round identifier lacks its ``r`` prefix."""


class InvalidFormatError(WCIFDecodeError):
    """Raised when a string does not follow the expected grammar."""


class InvalidEventIdError(WCIFDecodeError):
    """Raised when a token is not one of the known event identifiers."""


class InvalidAssignmentError(WCIFDecodeError):
    """Raised when an assignment code is neither competitor nor staff."""


class FieldDecodeError(WCIFDecodeError):
    """Raised when a named field of a record fails to decode."""

    def __init__(self, field: str, cause: Exception) -> None:
        super().__init__(f"Invalid value for field '{field}': {cause}")
        self.field = field
        self.cause = cause


__all__ = [
    "WCIFDecodeError",
    "NotANumberError",
    "InvalidResultError",
    "LengthError",
    "DigitParseError",
    "MissingEventIdError",
    "MissingRoundPrefixError",
    "InvalidFormatError",
    "InvalidEventIdError",
    "InvalidAssignmentError",
    "FieldDecodeError",
]
