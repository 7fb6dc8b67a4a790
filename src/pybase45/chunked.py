"""
Chunked base45 tuned for QR alphanumeric mode.

Converting two bytes at a time loses capacity at every group boundary.
Buffering up to seven bytes into one accumulator amortises that rounding,
getting close to the 11-bits-per-2-characters density a QR encoder achieves
in alphanumeric mode. Each chunk is written most significant digit first.

Seven bytes is the historical chunk width (a signed 64-bit buffer minus its
sign byte); Python integers have no such limit, but changing the width
changes the wire format, so it is opt-in through `ChunkLayout.for_width`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .alphabet import char_to_digit, digit_to_char
from .constants import BASE, DIGITS_FOR_BYTES, QR_CHUNK_BYTES
from .exceptions import AccumulatorOverflowError, InvalidChunkLengthError
from .util.bytes import BytesLike, as_bytes, as_text


def derive_digit_counts(max_bytes: int) -> tuple[int, ...]:
    """Smallest digit count d with 45**d >= 256**n, for n in 0..max_bytes."""

    if max_bytes < 1:
        raise ValueError(f"max_bytes must be positive, got {max_bytes}")
    counts: list[int] = []
    digits = 0
    for n in range(max_bytes + 1):
        while BASE**digits < 256**n:
            digits += 1
        counts.append(digits)
    return tuple(counts)


@dataclass(frozen=True, slots=True)
class ChunkLayout:
    """
    Chunk width and its byte-count -> digit-count correspondence.

    `digit_counts[n]` is the number of characters a chunk of `n` bytes
    encodes to. The table must be strictly increasing from 0 so that the
    decoder can map a digit count back to exactly one byte count.
    """

    chunk_bytes: int = QR_CHUNK_BYTES
    digit_counts: tuple[int, ...] = DIGITS_FOR_BYTES[: QR_CHUNK_BYTES + 1]

    def __post_init__(self) -> None:
        if self.chunk_bytes < 1:
            raise ValueError(f"chunk_bytes must be positive, got {self.chunk_bytes}")
        if len(self.digit_counts) != self.chunk_bytes + 1:
            raise ValueError(
                f"digit_counts needs {self.chunk_bytes + 1} entries, got {len(self.digit_counts)}"
            )
        if self.digit_counts[0] != 0:
            raise ValueError("digit_counts[0] must be 0")
        for n in range(1, len(self.digit_counts)):
            if self.digit_counts[n] <= self.digit_counts[n - 1]:
                raise ValueError("digit_counts must be strictly increasing")
            if BASE ** self.digit_counts[n] < 256**n:
                raise ValueError(f"{self.digit_counts[n]} digits cannot hold {n} bytes")

    @classmethod
    def for_width(cls, chunk_bytes: int) -> ChunkLayout:
        return cls(chunk_bytes=chunk_bytes, digit_counts=derive_digit_counts(chunk_bytes))

    @property
    def digits_per_chunk(self) -> int:
        return self.digit_counts[self.chunk_bytes]

    def digits_for(self, n_bytes: int) -> int:
        return self.digit_counts[n_bytes]

    def bytes_for(self, n_digits: int, *, position: int | None = None) -> int:
        try:
            return self.digit_counts.index(n_digits)
        except ValueError:
            raise InvalidChunkLengthError(digit_count=n_digits, position=position) from None


QR_CHUNK_LAYOUT = ChunkLayout()


def encode_qr_base45(data: BytesLike, *, layout: ChunkLayout = QR_CHUNK_LAYOUT) -> str:
    return "".join(_encode_chunks(as_bytes(data), layout=layout, start=0))


def decode_qr_base45(text: str | BytesLike, *, layout: ChunkLayout = QR_CHUNK_LAYOUT) -> bytes:
    return bytes(_decode_chunks(as_text(text), layout=layout, start=0))


def _encode_chunks(buf: bytes, *, layout: ChunkLayout, start: int) -> list[str]:
    out: list[str] = []
    for offset in range(0, len(buf), layout.chunk_bytes):
        chunk = buf[offset : offset + layout.chunk_bytes]
        acc = int.from_bytes(chunk, "big")

        digits: list[int] = []
        for _ in range(layout.digits_for(len(chunk))):
            acc, digit = divmod(acc, BASE)
            digits.append(digit)

        pos = start + offset
        out.extend(digit_to_char(digit, position=pos) for digit in reversed(digits))
    return out


def _decode_chunks(text: str | bytes, *, layout: ChunkLayout, start: int) -> bytearray:
    out = bytearray()
    step = layout.digits_per_chunk
    for offset in range(0, len(text), step):
        group = text[offset : offset + step]
        pos = start + offset

        acc = 0
        for i, ch in enumerate(group):
            acc = acc * BASE + char_to_digit(ch, position=pos + i)

        n_bytes = layout.bytes_for(len(group), position=pos)
        limit = (1 << (8 * n_bytes)) - 1
        if acc > limit:
            raise AccumulatorOverflowError(value=acc, limit=limit, position=pos)
        out += acc.to_bytes(n_bytes, "big")
    return out
