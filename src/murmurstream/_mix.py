from __future__ import annotations

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def rotl32(x: int, r: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << r) | (x >> (32 - r))) & _MASK_32


def rotl64(x: int, r: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << r) | (x >> (64 - r))) & _MASK_64


def fmix32(k: int) -> int:
    """Avalanche a 32-bit hash word."""
    k ^= k >> 16
    k = (k * 0x85EBCA6B) & _MASK_32
    k ^= k >> 13
    k = (k * 0xC2B2AE35) & _MASK_32
    k ^= k >> 16
    return k


def fmix64(k: int) -> int:
    """Avalanche a 64-bit hash word."""
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & _MASK_64
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & _MASK_64
    k ^= k >> 33
    return k


def check_seed(seed: int, mask: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError("seed must be an integer")
    if seed < 0:
        raise ValueError("seed must be non-negative")
    return seed & mask


def check_data(data) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return bytes(data)
