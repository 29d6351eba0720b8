"""Failure types raised while processing command-line options."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

ErrorKind = Literal[
    "invalid_input",
    "duplicate_option",
    "invalid_number",
    "out_of_range",
    "value_too_long",
    "missing_value",
    "unknown_option",
    "unexpected_argument",
    "help_requested",
]


class OptionError(ValueError):
    """Base error for a rejected argument vector.

    Every failure stops the scan; no configuration is produced.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, flag: str | None = None) -> None:
        super().__init__(message)
        self.flag = flag


class InvalidInputError(OptionError):
    """Raised when the argument vector itself is missing or empty."""

    kind: ErrorKind = "invalid_input"


class DuplicateOptionError(OptionError):
    kind: ErrorKind = "duplicate_option"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Option '-{flag}' was already given.", flag=flag)


class InvalidNumberError(OptionError):
    kind: ErrorKind = "invalid_number"

    def __init__(self, flag: str, value: str) -> None:
        super().__init__(
            f"Unable to convert value '{value}' of option '-{flag}' to a number.",
            flag=flag,
        )
        self.value = value


class OutOfRangeError(OptionError):
    kind: ErrorKind = "out_of_range"

    def __init__(self, flag: str, value: int, detail: str) -> None:
        super().__init__(f"Option '-{flag}' value {value} is out of range: {detail}.", flag=flag)
        self.value = value


class ValueTooLongError(OptionError):
    kind: ErrorKind = "value_too_long"

    def __init__(self, flag: str, value: str, max_length: int) -> None:
        super().__init__(
            f"Option '-{flag}' value '{value}' is longer than {max_length} characters.",
            flag=flag,
        )
        self.value = value


class MissingValueError(OptionError):
    kind: ErrorKind = "missing_value"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Option '-{flag}' requires an argument.", flag=flag)


class UnknownOptionError(OptionError):
    kind: ErrorKind = "unknown_option"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Unknown option '-{flag}'.", flag=flag)


class UnexpectedArgumentError(OptionError):
    """Raised when tokens remain that are neither flags nor flag values."""

    kind: ErrorKind = "unexpected_argument"

    def __init__(self, arguments: Sequence[str]) -> None:
        self.arguments = tuple(arguments)
        super().__init__(f"Invalid arguments encountered: {' '.join(self.arguments)}")


class HelpRequested(OptionError):
    """Raised for ``-h``; the caller shows help and does not start the server."""

    kind: ErrorKind = "help_requested"

    def __init__(self) -> None:
        super().__init__("Help requested.", flag="h")
