"""
Base45 alphabet lookups.

Both directions check bounds explicitly before indexing, so out-of-range
values always surface as the library's own error types rather than as an
`IndexError` (RFC 9285, section 6).
"""

from __future__ import annotations

from .constants import BASE45_ALPHABET, REVERSE_TABLE_SIZE, UNMAPPED
from .exceptions import InvalidCharacterError, InvalidDigitValueError


def build_reverse_table(alphabet: str = BASE45_ALPHABET) -> tuple[int, ...]:
    """Map every single-byte code to its digit value, or `UNMAPPED`."""

    if len(set(alphabet)) != len(alphabet):
        raise ValueError("alphabet symbols must be unique")
    table = [UNMAPPED] * REVERSE_TABLE_SIZE
    for value, symbol in enumerate(alphabet):
        code = ord(symbol)
        if code >= REVERSE_TABLE_SIZE:
            raise ValueError(f"alphabet symbol {symbol!r} is not a single-byte character")
        table[code] = value
    return tuple(table)


_REVERSE = build_reverse_table()


def digit_to_char(digit: int, *, position: int | None = None) -> str:
    if digit < 0 or digit >= len(BASE45_ALPHABET):
        raise InvalidDigitValueError(digit=digit, position=position)
    return BASE45_ALPHABET[digit]


def char_to_digit(char: str | int, *, position: int | None = None) -> int:
    """
    Return the digit value of `char`.

    `char` is either a one-character string or an integer code point, so the
    decoders can walk both `str` and ASCII `bytes` input without converting.
    """

    if isinstance(char, str):
        if len(char) != 1:
            raise InvalidCharacterError(char=char, position=position)
        code = ord(char)
    else:
        code = char
    if code < 0 or code >= REVERSE_TABLE_SIZE:
        raise InvalidCharacterError(char=char, position=position)
    digit = _REVERSE[code]
    if digit == UNMAPPED:
        raise InvalidCharacterError(char=char, position=position)
    return digit


def is_base45(text: str) -> bool:
    """True when every character of `text` belongs to the alphabet."""

    return all(ord(ch) < REVERSE_TABLE_SIZE and _REVERSE[ord(ch)] != UNMAPPED for ch in text)
