from __future__ import annotations

from typing import Any

from .hashing import MurmurHasher, new


def _value_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Unsupported type for murmur hashing: {type(value)!r}")


def _column_hash(hasher: MurmurHasher, value: Any) -> int:
    digest = hasher.copy().update(_value_bytes(value)).digest()
    # 128-bit digests are narrowed to their first eight bytes.
    return int.from_bytes(digest[:8], byteorder="little", signed=False)


def hash_pandas_series(series: Any, seed: int = 0, variant: str = "32x86"):
    """
    Hash a pandas Series of str/bytes into a uint32 or uint64 Series.
    """
    hasher = new(variant, seed)
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = [_column_hash(hasher, val) for val in series]
    dtype = "uint32" if hasher.digest_size == 4 else "uint64"
    return pd.Series(hashes, index=getattr(series, "index", None), dtype=dtype)


def hash_arrow_array(array: Any, seed: int = 0, variant: str = "32x86"):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint32 or uint64 Array.
    """
    hasher = new(variant, seed)
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = [
        _column_hash(hasher, val.as_py() if hasattr(val, "as_py") else val)
        for val in arr
    ]
    arrow_type = pa.uint32() if hasher.digest_size == 4 else pa.uint64()
    return pa.array(hashes, type=arrow_type)


def hash_polars_series(series: Any, seed: int = 0, variant: str = "32x86"):
    """
    Hash a polars Series into a UInt32 or UInt64 Series.
    """
    hasher = new(variant, seed)
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = [_column_hash(hasher, val) for val in ser]
    name = getattr(ser, "name", None) or "hash"
    dtype = pl.UInt32 if hasher.digest_size == 4 else pl.UInt64
    return pl.Series(name=name, values=hashes, dtype=dtype)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
