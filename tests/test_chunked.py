from __future__ import annotations

import random

import pytest

from pybase45 import QR_CHUNK_LAYOUT, ChunkLayout, decode_qr_base45, encode_qr_base45
from pybase45.chunked import derive_digit_counts
from pybase45.constants import BASE45_ALPHABET, DIGITS_FOR_BYTES
from pybase45.exceptions import (
    AccumulatorOverflowError,
    InvalidCharacterError,
    InvalidChunkLengthError,
)


def _expected_length(n: int, layout: ChunkLayout = QR_CHUNK_LAYOUT) -> int:
    full, rest = divmod(n, layout.chunk_bytes)
    return full * layout.digits_per_chunk + layout.digits_for(rest)


def test_pinned_table_matches_derivation() -> None:
    assert derive_digit_counts(8) == DIGITS_FOR_BYTES
    assert derive_digit_counts(8) == derive_digit_counts(8)
    assert ChunkLayout.for_width(7) == QR_CHUNK_LAYOUT
    assert QR_CHUNK_LAYOUT.digits_per_chunk == 11


def test_table_is_minimal_digit_count() -> None:
    for n, digits in enumerate(DIGITS_FOR_BYTES):
        assert 45**digits >= 256**n
        if digits:
            assert 45 ** (digits - 1) < 256**n


def test_bytes_for_inverts_digits_for() -> None:
    for n in range(QR_CHUNK_LAYOUT.chunk_bytes + 1):
        assert QR_CHUNK_LAYOUT.bytes_for(QR_CHUNK_LAYOUT.digits_for(n)) == n


@pytest.mark.parametrize("digits", [1, 4, 7, 10, 12])
def test_bytes_for_rejects_unknown_digit_counts(digits: int) -> None:
    with pytest.raises(InvalidChunkLengthError) as exc:
        QR_CHUNK_LAYOUT.bytes_for(digits, position=5)
    assert exc.value.digit_count == digits
    assert exc.value.position == 5


def test_known_values() -> None:
    assert encode_qr_base45(b"") == ""
    assert encode_qr_base45(b"\x00") == "00"
    assert encode_qr_base45(b"\xff") == "5U"
    assert encode_qr_base45(b"\x01\x00") == "05V"
    assert encode_qr_base45(bytes(7)) == "0" * 11
    assert decode_qr_base45("5U") == b"\xff"
    assert decode_qr_base45("0" * 11) == bytes(7)


def test_digits_are_most_significant_first() -> None:
    for value in range(256):
        enc = encode_qr_base45(bytes([value]))
        assert enc == BASE45_ALPHABET[value // 45] + BASE45_ALPHABET[value % 45]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 7, 8, 13, 14, 15, 21, 22])
def test_chunk_boundaries_roundtrip(n: int) -> None:
    rng = random.Random(n)
    for data in (bytes(n), b"\xff" * n, bytes(rng.randrange(256) for _ in range(n))):
        enc = encode_qr_base45(data)
        assert len(enc) == _expected_length(n)
        assert decode_qr_base45(enc) == data


def test_roundtrip_random_lengths() -> None:
    rng = random.Random(45)
    for n in list(range(0, 100)) + [1024, 4999, 5000]:
        data = bytes(rng.randrange(256) for _ in range(n))
        assert decode_qr_base45(encode_qr_base45(data)) == data


def test_accepts_ascii_bytes_input() -> None:
    enc = encode_qr_base45(bytearray(b"Some cool input data! !@#$%^&*()_+"))
    assert decode_qr_base45(enc.encode("ascii")) == b"Some cool input data! !@#$%^&*()_+"


@pytest.mark.parametrize("length", [1, 4, 7, 10, 12, 15])
def test_trailing_chunk_with_unmapped_length_is_rejected(length: int) -> None:
    text = "0" * length
    with pytest.raises(InvalidChunkLengthError) as exc:
        decode_qr_base45(text)
    assert exc.value.digit_count == length % 11
    assert exc.value.position == length - length % 11


@pytest.mark.parametrize("text", ["::", "0" * 11 + "::", ":" * 11, "6" + "0"])
def test_chunk_value_too_large_for_its_bytes_is_rejected(text: str) -> None:
    with pytest.raises(AccumulatorOverflowError):
        decode_qr_base45(text)


def test_invalid_character_position() -> None:
    with pytest.raises(InvalidCharacterError) as exc:
        decode_qr_base45("0" * 11 + "0a")
    assert exc.value.position == 12


def test_wider_layout_changes_the_format() -> None:
    wide = ChunkLayout.for_width(8)
    assert wide.digit_counts == DIGITS_FOR_BYTES
    assert wide.digits_per_chunk == 12

    data = bytes(range(1, 41))
    enc = encode_qr_base45(data, layout=wide)
    assert len(enc) == 5 * 12
    assert decode_qr_base45(enc, layout=wide) == data
    assert enc != encode_qr_base45(data)


def test_for_width_supports_very_wide_chunks() -> None:
    layout = ChunkLayout.for_width(32)
    data = b"\xff" * 100
    assert decode_qr_base45(encode_qr_base45(data, layout=layout), layout=layout) == data


@pytest.mark.parametrize(
    ("chunk_bytes", "digit_counts", "message"),
    [
        (0, (0,), "positive"),
        (2, (0, 2), "entries"),
        (2, (1, 2, 3), "must be 0"),
        (2, (0, 3, 3), "increasing"),
        (2, (0, 2, 2), "increasing"),
        (2, (0, 1, 3), "cannot hold"),
    ],
)
def test_invalid_layouts_are_rejected(
    chunk_bytes: int, digit_counts: tuple[int, ...], message: str
) -> None:
    with pytest.raises(ValueError, match=message):
        ChunkLayout(chunk_bytes=chunk_bytes, digit_counts=digit_counts)


def test_derive_digit_counts_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        derive_digit_counts(0)
