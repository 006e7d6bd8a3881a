# hexview/errors.py

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for malformed-input failures raised by hexview."""


class EmptyInputError(ConversionError):
    def __init__(self, what: str = "input") -> None:
        super().__init__(f"Empty {what}.")


class InvalidCharacterError(ConversionError):
    """A character outside the hex alphabet, with its index in the raw input."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid hex character {char!r} at position {position}.")


class InvalidBinaryCharacterError(ConversionError):
    def __init__(self, char: str, position: int | None = None) -> None:
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid binary character {char!r}{where}.")


class InvalidLengthError(ConversionError):
    """Byte count does not match the requested numeric width."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} bytes, got {actual}.")


class InvalidRegisterError(ConversionError):
    def __init__(self, token: str, reason: str = "not a 16-bit register value") -> None:
        self.token = token
        super().__init__(f"Invalid register {token!r}: {reason}.")
