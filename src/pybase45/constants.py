from __future__ import annotations

BASE45_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
BASE = len(BASE45_ALPHABET)
BASE_SQUARED = BASE * BASE

# Reverse lookup is indexed by any single-byte code.
REVERSE_TABLE_SIZE = 256
UNMAPPED = -1

TRIPLET_MAX = 0xFFFF
PAIR_MAX = 0xFF

# zxing `com.google.zxing.qrcode.encoder.Encoder.ALPHANUMERIC_TABLE` (zxing 3.x),
# covering codes 0x00-0x5f. Pinned here instead of read out of the library.
QR_ALPHANUMERIC_TABLE: tuple[int, ...] = (
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,  # 0x00-0x0f
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,  # 0x10-0x1f
    36, -1, -1, -1, 37, 38, -1, -1, -1, -1, 39, 40, -1, 41, 42, 43,  # 0x20-0x2f
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 44, -1, -1, -1, -1, -1,  # 0x30-0x3f
    -1, 10, 11, 12, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 24,  # 0x40-0x4f
    25, 26, 27, 28, 29, 30, 31, 32, 33, 34, 35, -1, -1, -1, -1, -1,  # 0x50-0x5f
)

# Minimum base45 digits able to hold N bytes: smallest d with 45**d >= 256**N.
# Index 8 is only reachable with a full 64-bit chunk.
DIGITS_FOR_BYTES: tuple[int, ...] = (0, 2, 3, 5, 6, 8, 9, 11, 12)

QR_CHUNK_BYTES = 7
QR_DIGITS_PER_CHUNK = DIGITS_FOR_BYTES[QR_CHUNK_BYTES]

# QR alphanumeric mode packs two characters into 11 bits, a lone one into 6.
QR_BITS_PER_PAIR = 11
QR_BITS_PER_SINGLE = 6

# Stream helpers read this many groups per block.
DEFAULT_BLOCK_GROUPS = 1024
