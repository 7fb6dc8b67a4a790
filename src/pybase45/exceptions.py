from __future__ import annotations


class Pybase45Error(Exception):
    """Base error for the pybase45 library."""


class EncodeError(Pybase45Error):
    """Encoder produced an invalid intermediate value."""


class DecodeError(Pybase45Error, ValueError):
    """Encoded input is malformed."""


class InvalidDigitValueError(EncodeError):
    """
    A digit outside 0..44 reached the alphabet lookup.

    Legitimate digit production always stays in range, so this points at a
    defect in the conversion arithmetic rather than at the caller's data.
    """

    def __init__(self, *, digit: int, position: int | None = None) -> None:
        where = f" at index {position}" if position is not None else ""
        super().__init__(f"digit value {digit!r}{where} outside base45 range 0-44")
        self.digit = digit
        self.position = position


class InvalidCharacterError(DecodeError):
    """A character is not part of the base45 alphabet."""

    def __init__(self, *, char: str | int, position: int | None = None) -> None:
        where = f" at index {position}" if position is not None else ""
        shown = chr(char) if isinstance(char, int) and 0 <= char < 0x110000 else char
        super().__init__(f"invalid base45 character {shown!r}{where}")
        self.char = char
        self.position = position


class AccumulatorOverflowError(DecodeError):
    """A decoded group's value exceeds what its byte count can hold."""

    def __init__(self, *, value: int, limit: int, position: int | None = None) -> None:
        where = f" at index {position}" if position is not None else ""
        super().__init__(f"decoded group value {value}{where} exceeds maximum {limit}")
        self.value = value
        self.limit = limit
        self.position = position


class TruncatedInputError(DecodeError):
    """A triplet group ended after a single character."""

    def __init__(self, *, position: int) -> None:
        super().__init__(f"unexpected end of input at index {position}: need at least 2 characters")
        self.position = position


class InvalidChunkLengthError(DecodeError):
    """A chunk's digit count has no entry in the correspondence table."""

    def __init__(self, *, digit_count: int, position: int | None = None) -> None:
        where = f" at index {position}" if position is not None else ""
        super().__init__(f"chunk of {digit_count} digits{where} does not map to a byte count")
        self.digit_count = digit_count
        self.position = position
