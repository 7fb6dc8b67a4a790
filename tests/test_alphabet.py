from __future__ import annotations

import pytest

from pybase45.alphabet import build_reverse_table, char_to_digit, digit_to_char, is_base45
from pybase45.constants import BASE45_ALPHABET, QR_ALPHANUMERIC_TABLE, UNMAPPED
from pybase45.exceptions import (
    DecodeError,
    EncodeError,
    InvalidCharacterError,
    InvalidDigitValueError,
)


def test_alphabet_is_45_unique_ascii_symbols() -> None:
    assert len(BASE45_ALPHABET) == 45
    assert len(set(BASE45_ALPHABET)) == 45
    assert BASE45_ALPHABET.isascii()


def test_lookups_are_inverse() -> None:
    for value, symbol in enumerate(BASE45_ALPHABET):
        assert digit_to_char(value) == symbol
        assert char_to_digit(symbol) == value
        assert char_to_digit(ord(symbol)) == value


def test_symbol_values_match_rfc_table() -> None:
    assert char_to_digit("9") == 9
    assert char_to_digit("A") == 10
    assert char_to_digit("Z") == 35
    assert char_to_digit(" ") == 36
    assert char_to_digit(":") == 44


def test_reverse_table_matches_pinned_qr_alphanumeric_table() -> None:
    table = build_reverse_table()
    assert len(table) == 256
    assert table[: len(QR_ALPHANUMERIC_TABLE)] == QR_ALPHANUMERIC_TABLE
    assert all(v == UNMAPPED for v in table[len(QR_ALPHANUMERIC_TABLE) :])


def test_reverse_table_construction_is_idempotent() -> None:
    assert build_reverse_table() == build_reverse_table()


def test_reverse_table_rejects_duplicate_or_wide_symbols() -> None:
    with pytest.raises(ValueError, match="unique"):
        build_reverse_table("AA")
    with pytest.raises(ValueError, match="single-byte"):
        build_reverse_table("A€")


@pytest.mark.parametrize("digit", [-1, 45, 100])
def test_digit_to_char_rejects_out_of_range(digit: int) -> None:
    with pytest.raises(InvalidDigitValueError) as exc:
        digit_to_char(digit, position=3)
    assert exc.value.digit == digit
    assert exc.value.position == 3
    assert isinstance(exc.value, EncodeError)


@pytest.mark.parametrize("char", ["a", "#", "\x00", "€", "AB", "", 256, -1, 0x7F])
def test_char_to_digit_rejects_non_alphabet(char: str | int) -> None:
    with pytest.raises(InvalidCharacterError) as exc:
        char_to_digit(char, position=7)
    assert exc.value.char == char
    assert exc.value.position == 7
    assert isinstance(exc.value, DecodeError)
    assert isinstance(exc.value, ValueError)


def test_is_base45() -> None:
    assert is_base45("")
    assert is_base45(BASE45_ALPHABET)
    assert not is_base45("abc")
    assert not is_base45("A€")
