"""Storage key hashers and fixed-width integer codecs.

Map keys are stored as ``blake2_128(encoded) + encoded`` so that the
original key can be recovered from a raw storage key when iterating.
"""

from __future__ import annotations

import hashlib

U32_MAX = 2**32 - 1
U128_MAX = 2**128 - 1

U32_WIDTH = 4
U128_WIDTH = 16
BLAKE2_128_WIDTH = 16


def blake2_128(data: bytes) -> bytes:
    """16-byte blake2b digest of *data*."""
    return hashlib.blake2b(data, digest_size=BLAKE2_128_WIDTH).digest()


def blake2_128_concat(data: bytes) -> bytes:
    """Hash *data* and append the raw bytes.

    Parameters
    ----------
    data : bytes
        Encoded map key.

    Returns
    -------
    bytes
        ``blake2_128(data) + data``.
    """
    return blake2_128(data) + data


def strip_blake2_128_concat(hashed: bytes, width: int) -> tuple[bytes, bytes]:
    """Split the first ``blake2_128_concat`` key of *width* bytes off *hashed*.

    Returns the raw key bytes and whatever follows them.
    """
    end = BLAKE2_128_WIDTH + width
    if len(hashed) < end:
        raise ValueError(f"hashed key too short: expected at least {end} bytes, got {len(hashed)}")
    digest, raw, rest = hashed[:BLAKE2_128_WIDTH], hashed[BLAKE2_128_WIDTH:end], hashed[end:]
    if blake2_128(raw) != digest:
        raise ValueError("hashed key digest does not match its key bytes")
    return raw, rest


def check_width(name: str, value: int, maximum: int) -> int:
    """Reject values outside ``0..maximum``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise ValueError(f"{name} out of range: {value} (expected 0..{maximum})")
    return value


def encode_uint(value: int, width: int) -> bytes:
    return value.to_bytes(width, "little")


def decode_uint(data: bytes, width: int) -> int:
    if len(data) != width:
        raise ValueError(f"expected {width} bytes, got {len(data)}")
    return int.from_bytes(data, "little")
