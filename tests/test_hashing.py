import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from murmurstream import Murmur32x86, Murmur128x64, Murmur128x86, VARIANTS
from murmurstream.hashing import MurmurDigest, hash_file, murmur_hash, new

FOX = "the quick brown fox jumps over the lazy dog"


@pytest.mark.parametrize(
    "variant,engine",
    [
        ("32x86", Murmur32x86),
        ("32", Murmur32x86),
        ("", Murmur32x86),
        ("128x86", Murmur128x86),
        ("128x64", Murmur128x64),
    ],
)
def test_new_selects_variant(variant, engine):
    hasher = new(variant, seed=3)
    assert isinstance(hasher, engine)
    assert hasher.seed == 3


def test_variants_lists_tokens():
    assert set(VARIANTS) == {"32x86", "32", "", "128x86", "128x64"}


def test_unknown_variant():
    with pytest.raises(ValueError):
        new("64")
    with pytest.raises(ValueError):
        new("128X64")
    with pytest.raises(ValueError):
        murmur_hash(b"x", variant="sha1")


def test_murmur_hash_matches_streaming():
    result = murmur_hash(FOX, variant="128x64")
    assert isinstance(result, MurmurDigest)
    assert result.hexdigest() == "b386ade2fee9e4bc7f4b6e4074e3e20a"
    assert result.digest() == murmur_hash(FOX.encode("utf-8"), variant="128x64").digest()


def test_murmur_hash_intdigest_32():
    assert murmur_hash(FOX).intdigest() == 0x02DE62FF
    assert murmur_hash(FOX).hexdigest() == "ff62de02"


def test_murmur_hash_rejects_unsupported_type():
    with pytest.raises(TypeError):
        murmur_hash(123)  # type: ignore


@pytest.mark.parametrize("chunk_size", [1, 3, 16, 65536])
def test_hash_file_chunking(tmp_path, chunk_size):
    path = tmp_path / "fox.txt"
    path.write_bytes(FOX.encode("utf-8"))
    for variant in ("32x86", "128x86", "128x64"):
        expected = murmur_hash(FOX, seed=11, variant=variant)
        assert hash_file(path, seed=11, variant=variant, chunk_size=chunk_size) == expected


def test_hash_file_errors(tmp_path):
    with pytest.raises(OSError):
        hash_file(tmp_path / "missing")
    with pytest.raises(ValueError):
        hash_file(tmp_path / "missing", chunk_size=0)


def test_library_logger_leaves_host_configuration_alone():
    from murmurstream import hashing

    assert hashing.LOGGER.name == "murmurstream.hashing"
    assert hashing.LOGGER.handlers == []
    assert hashing.LOGGER.propagate is True
