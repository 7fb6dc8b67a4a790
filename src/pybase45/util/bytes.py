from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def as_bytes(data: BytesLike) -> bytes:
    """Coerce bytes-like input, rejecting text so callers pick an encoding themselves."""

    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")


def as_text(data: str | BytesLike) -> str | bytes:
    """Accept encoded input as `str` or ASCII bytes; both iterate per character."""

    if isinstance(data, (str, bytes)):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or a bytes-like object, got {type(data).__name__}")
