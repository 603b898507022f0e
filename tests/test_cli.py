import io
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from murmurstream.cli import build_parser, digest_file, dispatch, main

FOX = b"the quick brown fox jumps over the lazy dog"


def _run(argv):
    out = io.StringIO()
    code = dispatch(build_parser().parse_args(argv), out=out)
    return code, out.getvalue()


@pytest.fixture
def fox_file(tmp_path):
    path = tmp_path / "fox.txt"
    path.write_bytes(FOX)
    return str(path)


def test_default_method_is_32bit(fox_file):
    code, output = _run([fox_file])
    assert code == 0
    assert output == f"ff62de02  {fox_file}\n"


@pytest.mark.parametrize(
    "method,expected",
    [
        ("32", "ff62de02"),
        ("128x86", "fdb47daf02170d403f6093539b388af2"),
        ("128x64", "b386ade2fee9e4bc7f4b6e4074e3e20a"),
    ],
)
def test_method_selection(fox_file, method, expected):
    _, output = _run(["-m", method, fox_file])
    assert output == f"{expected}  {fox_file}\n"


def test_unreadable_file_is_skipped(fox_file, tmp_path):
    missing = str(tmp_path / "missing.txt")
    code, output = _run([missing, fox_file, str(tmp_path)])
    assert code == 0
    assert output.splitlines() == [f"ff62de02  {fox_file}"]


def test_unknown_method_emits_nothing(fox_file):
    code, output = _run(["-m", "sha256", fox_file])
    assert code == 0
    assert output == ""


@pytest.mark.parametrize("method", ["128X64", "128x64 ", "32X86"])
def test_method_names_match_exactly(fox_file, method):
    code, output = _run(["-m", method, fox_file])
    assert code == 0
    assert output == ""


def test_seed_flag(fox_file):
    _, seeded = _run(["-s", "42", fox_file])
    _, unseeded = _run([fox_file])
    assert seeded != unseeded


def test_negative_seed_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-s", "-1", "file"])
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-s", "abc", "file"])


def test_digest_file_returns_none_on_error(tmp_path):
    assert digest_file(str(tmp_path / "missing"), "", 0) is None


def test_main_writes_to_stdout(fox_file, capsys):
    assert main(["-m", "128x64", fox_file]) == 0
    captured = capsys.readouterr()
    assert captured.out == f"b386ade2fee9e4bc7f4b6e4074e3e20a  {fox_file}\n"
