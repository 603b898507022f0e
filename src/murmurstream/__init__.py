"""
Streaming MurmurHash3 digests: 32-bit, and 128-bit for 32- and 64-bit words.
"""

from .murmur32 import murmur32x86, Murmur32x86
from .murmur128x86 import murmur128x86, Murmur128x86
from .murmur128x64 import murmur128x64, Murmur128x64
from .hashing import MurmurDigest, VARIANTS, hash_file, murmur_hash, new
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "Murmur32x86",
    "Murmur128x86",
    "Murmur128x64",
    "MurmurDigest",
    "VARIANTS",
    "hash_file",
    "murmur_hash",
    "murmur32x86",
    "murmur128x86",
    "murmur128x64",
    "new",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
