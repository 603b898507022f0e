import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from murmurstream.hashing import murmur_hash

VALUES = ["alpha", "beta", b"gamma"]


def _expected(variant, seed=0):
    return [
        int.from_bytes(murmur_hash(v, seed=seed, variant=variant).digest()[:8], "little")
        for v in VALUES
    ]


def test_pandas_series():
    pd = pytest.importorskip("pandas")
    from murmurstream.vectorized import hash_pandas_series

    series = pd.Series(VALUES, index=[10, 20, 30], dtype=object)
    result = hash_pandas_series(series, seed=4)
    assert str(result.dtype) == "uint32"
    assert list(result.index) == [10, 20, 30]
    assert result.tolist() == _expected("32x86", seed=4)

    wide = hash_pandas_series(series, variant="128x64")
    assert str(wide.dtype) == "uint64"
    assert wide.tolist() == _expected("128x64")


def test_arrow_array():
    pa = pytest.importorskip("pyarrow")
    from murmurstream.vectorized import hash_arrow_array

    result = hash_arrow_array(pa.array(["alpha", "beta"]), variant="128x86")
    assert result.type == pa.uint64()
    assert result.to_pylist() == _expected("128x86")[:2]


def test_polars_series():
    pl = pytest.importorskip("polars")
    from murmurstream.vectorized import hash_polars_series

    result = hash_polars_series(pl.Series("names", ["alpha", "beta"]))
    assert result.dtype == pl.UInt32
    assert result.name == "names"
    assert result.to_list() == _expected("32x86")[:2]


def test_unsupported_value_type():
    pd = pytest.importorskip("pandas")
    from murmurstream.vectorized import hash_pandas_series

    with pytest.raises(TypeError):
        hash_pandas_series(pd.Series([1, 2, 3]))


@pytest.mark.parametrize(
    "name", ["hash_pandas_series", "hash_arrow_array", "hash_polars_series"]
)
def test_unknown_variant_rejected_before_hashing(name):
    from murmurstream import vectorized

    with pytest.raises(ValueError):
        getattr(vectorized, name)([], variant="bogus")
