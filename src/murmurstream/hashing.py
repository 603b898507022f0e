from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Union

from .murmur32 import Murmur32x86, murmur32x86
from .murmur128x64 import Murmur128x64, murmur128x64
from .murmur128x86 import Murmur128x86, murmur128x86

LOGGER = logging.getLogger(__name__)

MurmurHasher = Union[Murmur32x86, Murmur128x86, Murmur128x64]

_CONSTRUCTORS = {
    "32x86": murmur32x86,
    "32": murmur32x86,
    "": murmur32x86,
    "128x86": murmur128x86,
    "128x64": murmur128x64,
}

VARIANTS = tuple(_CONSTRUCTORS)


def _select_hasher(variant: str, seed: int) -> MurmurHasher:
    if variant not in _CONSTRUCTORS:
        raise ValueError(f"Unsupported variant: {variant!r}")
    return _CONSTRUCTORS[variant](seed)


def new(variant: str = "32x86", seed: int = 0) -> MurmurHasher:
    """
    Create a streaming hasher for the named variant.

    Args:
        variant: "32x86" (also "32" or ""), "128x86" or "128x64" (exact match)
        seed: Non-negative integer seed, truncated to the variant's lane width

    Raises:
        ValueError: If variant is unknown or seed is negative
        TypeError: If seed is not an integer
    """
    return _select_hasher(variant, seed)


@dataclass(frozen=True)
class MurmurDigest:
    _digest: bytes

    def digest(self) -> bytes:
        return self._digest

    def hexdigest(self) -> str:
        return self._digest.hex()

    def intdigest(self) -> int:
        return int.from_bytes(self._digest, byteorder="little", signed=False)


def murmur_hash(data: Any, seed: int = 0, variant: str = "32x86") -> MurmurDigest:
    """
    Hash a bytes-like value (or a str, encoded as UTF-8) in one call.

    Returns:
        MurmurDigest object with digest(), hexdigest(), and intdigest() methods.

    Raises:
        ValueError: If variant is unsupported
        TypeError: If data is neither str nor bytes-like
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    hasher = _select_hasher(variant, seed)
    hasher.update(data)
    return MurmurDigest(hasher.digest())


def hash_file(
    path: Union[str, "os.PathLike[str]"],
    seed: int = 0,
    variant: str = "32x86",
    chunk_size: int = 65536,
) -> MurmurDigest:
    """
    Hash the contents of a file, reading it in chunks of ``chunk_size`` bytes.

    Raises:
        OSError: If the file cannot be opened or read
        ValueError: If variant is unsupported or chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    hasher = _select_hasher(variant, seed)
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b""):
            hasher.update(chunk)
    LOGGER.debug("Hashed %s with %s (seed=%d)", path, hasher.name, hasher.seed)
    return MurmurDigest(hasher.digest())


__all__ = ["MurmurDigest", "MurmurHasher", "VARIANTS", "hash_file", "murmur_hash", "new"]
