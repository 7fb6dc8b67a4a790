"""
pybase45: Base45 binary-to-text codecs for QR alphanumeric payloads.

Two encodings share one 45-symbol alphabet: the RFC 9285 triplet codec
(`encode_base45` / `decode_base45`) and a chunked codec tuned for QR
alphanumeric packing (`encode_qr_base45` / `decode_qr_base45`).
"""

from __future__ import annotations

from .alphabet import char_to_digit, digit_to_char
from .chunked import QR_CHUNK_LAYOUT, ChunkLayout, decode_qr_base45, encode_qr_base45
from .constants import BASE45_ALPHABET
from .exceptions import (
    AccumulatorOverflowError,
    DecodeError,
    EncodeError,
    InvalidCharacterError,
    InvalidChunkLengthError,
    InvalidDigitValueError,
    Pybase45Error,
    TruncatedInputError,
)
from .qr import PackingStats, alphanumeric_bit_length, make_qr_code, packing_stats
from .stream import decode_stream, encode_stream, iter_decode, iter_encode
from .triplet import decode_base45, encode_base45

__all__ = [
    "BASE45_ALPHABET",
    "QR_CHUNK_LAYOUT",
    "AccumulatorOverflowError",
    "ChunkLayout",
    "DecodeError",
    "EncodeError",
    "InvalidCharacterError",
    "InvalidChunkLengthError",
    "InvalidDigitValueError",
    "PackingStats",
    "Pybase45Error",
    "TruncatedInputError",
    "alphanumeric_bit_length",
    "char_to_digit",
    "decode_base45",
    "decode_qr_base45",
    "decode_stream",
    "digit_to_char",
    "encode_base45",
    "encode_qr_base45",
    "encode_stream",
    "iter_decode",
    "iter_encode",
    "make_qr_code",
    "packing_stats",
]

__version__ = "0.1.0"
