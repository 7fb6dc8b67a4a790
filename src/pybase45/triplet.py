"""
RFC 9285 Base45: every 2 bytes become 3 characters, a trailing byte becomes 2.

Digits are written least significant first, so `b"AB"` (0x4142 = 16706 =
11 + 11*45 + 8*45**2) encodes to `"BB8"`.
"""

from __future__ import annotations

from .alphabet import char_to_digit, digit_to_char
from .constants import BASE, BASE_SQUARED, PAIR_MAX, TRIPLET_MAX
from .exceptions import AccumulatorOverflowError, TruncatedInputError
from .util.bytes import BytesLike, as_bytes, as_text


def encode_base45(data: BytesLike) -> str:
    return "".join(_encode_groups(as_bytes(data), start=0))


def decode_base45(text: str | BytesLike) -> bytes:
    return bytes(_decode_groups(as_text(text), start=0))


def _encode_groups(buf: bytes, *, start: int) -> list[str]:
    out: list[str] = []
    idx = 0
    while idx < len(buf):
        pos = start + idx
        if len(buf) - idx >= 2:
            n = (buf[idx] << 8) | buf[idx + 1]
            e, rem = divmod(n, BASE_SQUARED)
            d, c = divmod(rem, BASE)
            out.append(digit_to_char(c, position=pos))
            out.append(digit_to_char(d, position=pos))
            out.append(digit_to_char(e, position=pos))
            idx += 2
        else:
            d, c = divmod(buf[idx], BASE)
            out.append(digit_to_char(c, position=pos))
            out.append(digit_to_char(d, position=pos))
            idx += 1
    return out


def _decode_groups(text: str | bytes, *, start: int) -> bytearray:
    out = bytearray()
    idx = 0
    while idx < len(text):
        remaining = len(text) - idx
        pos = start + idx
        # A group is 3 characters unless fewer remain; then it must be exactly 2.
        if remaining == 1:
            raise TruncatedInputError(position=pos)
        full = remaining >= 3

        c = char_to_digit(text[idx], position=pos)
        d = char_to_digit(text[idx + 1], position=pos + 1)
        e = char_to_digit(text[idx + 2], position=pos + 2) if full else 0

        value = c + d * BASE + e * BASE_SQUARED
        limit = TRIPLET_MAX if full else PAIR_MAX
        if value > limit:
            raise AccumulatorOverflowError(value=value, limit=limit, position=pos)

        a, b = divmod(value, 256)
        if full:
            out.append(a)
            idx += 3
        else:
            idx += 2
        out.append(b)
    return out
