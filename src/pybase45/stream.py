"""
Incremental encode/decode over iterables of blocks and file objects.

Input blocks of any size are re-cut on group boundaries (2 bytes / 3
characters for the standard codec, one chunk for the QR codec), so the
concatenated output always equals the one-shot result and only one block
is held in memory at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, BinaryIO, Literal, TextIO, TypeVar

from . import chunked, triplet
from .chunked import QR_CHUNK_LAYOUT, ChunkLayout
from .constants import DEFAULT_BLOCK_GROUPS
from .util.bytes import as_bytes

log = logging.getLogger(__name__)

Variant = Literal["standard", "qr"]

_T = TypeVar("_T", str, bytes)


def _check_variant(variant: str) -> None:
    if variant not in ("standard", "qr"):
        raise ValueError(f"unknown base45 variant: {variant!r}")


def _byte_unit(variant: Variant, layout: ChunkLayout) -> int:
    return 2 if variant == "standard" else layout.chunk_bytes


def _char_unit(variant: Variant, layout: ChunkLayout) -> int:
    return 3 if variant == "standard" else layout.digits_per_chunk


def _aligned(blocks: Iterable[_T], unit: int) -> Iterator[tuple[int, _T]]:
    """Yield `(offset, piece)` where every piece but the last is a multiple of `unit` long."""

    pending: _T | None = None
    offset = 0
    for block in blocks:
        pending = block if pending is None else pending + block
        cut = len(pending) - len(pending) % unit
        if cut:
            yield offset, pending[:cut]
            offset += cut
            pending = pending[cut:]
    if pending:
        yield offset, pending


def iter_encode(
    blocks: Iterable[bytes | bytearray | memoryview],
    *,
    variant: Variant = "standard",
    layout: ChunkLayout = QR_CHUNK_LAYOUT,
) -> Iterator[str]:
    _check_variant(variant)
    unit = _byte_unit(variant, layout)
    for offset, piece in _aligned((as_bytes(b) for b in blocks), unit):
        if variant == "standard":
            yield "".join(triplet._encode_groups(piece, start=offset))
        else:
            yield "".join(chunked._encode_chunks(piece, layout=layout, start=offset))


def iter_decode(
    blocks: Iterable[str],
    *,
    variant: Variant = "standard",
    layout: ChunkLayout = QR_CHUNK_LAYOUT,
) -> Iterator[bytes]:
    _check_variant(variant)
    unit = _char_unit(variant, layout)
    for offset, piece in _aligned(blocks, unit):
        if variant == "standard":
            yield bytes(triplet._decode_groups(piece, start=offset))
        else:
            yield bytes(chunked._decode_chunks(piece, layout=layout, start=offset))


def _read_blocks(src: BinaryIO | TextIO, size: int) -> Iterator[Any]:
    while True:
        block = src.read(size)
        if not block:
            return
        yield block


def encode_stream(
    src: BinaryIO,
    dst: TextIO,
    *,
    variant: Variant = "standard",
    layout: ChunkLayout = QR_CHUNK_LAYOUT,
    block_groups: int = DEFAULT_BLOCK_GROUPS,
) -> int:
    """Encode everything readable from `src` into `dst`; return characters written."""

    _check_variant(variant)
    size = _byte_unit(variant, layout) * block_groups
    written = 0
    for piece in iter_encode(_read_blocks(src, size), variant=variant, layout=layout):
        dst.write(piece)
        written += len(piece)
    log.debug("base45 %s encode: wrote %d characters", variant, written)
    return written


def decode_stream(
    src: TextIO,
    dst: BinaryIO,
    *,
    variant: Variant = "standard",
    layout: ChunkLayout = QR_CHUNK_LAYOUT,
    block_groups: int = DEFAULT_BLOCK_GROUPS,
) -> int:
    """Decode everything readable from `src` into `dst`; return bytes written."""

    _check_variant(variant)
    size = _char_unit(variant, layout) * block_groups
    written = 0
    for piece in iter_decode(_read_blocks(src, size), variant=variant, layout=layout):
        dst.write(piece)
        written += len(piece)
    log.debug("base45 %s decode: wrote %d bytes", variant, written)
    return written
