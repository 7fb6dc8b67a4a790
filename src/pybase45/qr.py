"""
Helpers for handing base45 output to a QR encoder.

A QR alphanumeric segment packs two characters into 11 bits (45**2 = 2025
of 2048 states) and a trailing odd character into 6 bits. The functions
here measure what that packing costs for a payload and, with the optional
`qrcode` extra installed, build a code that carries the payload as an
alphanumeric segment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .alphabet import is_base45
from .chunked import QR_CHUNK_LAYOUT, ChunkLayout, encode_qr_base45
from .constants import QR_BITS_PER_PAIR, QR_BITS_PER_SINGLE
from .stream import Variant, _check_variant
from .triplet import encode_base45
from .util.bytes import BytesLike

if TYPE_CHECKING:
    import qrcode


def alphanumeric_bit_length(text: str) -> int:
    """Data bits of an alphanumeric segment (mode indicator and length field excluded)."""

    if not is_base45(text):
        raise ValueError("text contains characters outside the QR alphanumeric set")
    pairs, single = divmod(len(text), 2)
    return pairs * QR_BITS_PER_PAIR + single * QR_BITS_PER_SINGLE


@dataclass(frozen=True, slots=True)
class PackingStats:
    raw_bytes: int
    encoded_chars: int
    packed_bits: int

    @property
    def packed_bytes(self) -> int:
        return (self.packed_bits + 7) // 8

    @property
    def overhead(self) -> float:
        """Fractional size increase of the packed segment over the raw payload."""

        if not self.raw_bytes:
            return 0.0
        return (self.packed_bytes - self.raw_bytes) / self.raw_bytes


def encode_payload(
    payload: BytesLike, *, variant: Variant = "qr", layout: ChunkLayout = QR_CHUNK_LAYOUT
) -> str:
    _check_variant(variant)
    if variant == "standard":
        return encode_base45(payload)
    return encode_qr_base45(payload, layout=layout)


def packing_stats(
    payload: BytesLike, *, variant: Variant = "qr", layout: ChunkLayout = QR_CHUNK_LAYOUT
) -> PackingStats:
    text = encode_payload(payload, variant=variant, layout=layout)
    return PackingStats(
        raw_bytes=len(payload),
        encoded_chars=len(text),
        packed_bits=alphanumeric_bit_length(text),
    )


def make_qr_code(
    payload: BytesLike,
    *,
    variant: Variant = "qr",
    layout: ChunkLayout = QR_CHUNK_LAYOUT,
    error_correction: int | None = None,
    box_size: int = 10,
    border: int = 4,
    **kwargs: Any,
) -> qrcode.QRCode:
    """
    Build a `qrcode.QRCode` holding `payload` as one alphanumeric segment.

    Requires the `qr` extra. Sizing and error correction are left to the
    QR library; `fit=True` picks the smallest version that holds the data.
    """

    import qrcode  # optional extra
    from qrcode.util import MODE_ALPHA_NUM, QRData

    text = encode_payload(payload, variant=variant, layout=layout)
    qr = qrcode.QRCode(
        error_correction=(
            error_correction if error_correction is not None else qrcode.ERROR_CORRECT_M
        ),
        box_size=box_size,
        border=border,
        **kwargs,
    )
    qr.add_data(QRData(text, mode=MODE_ALPHA_NUM))
    qr.make(fit=True)
    return qr
