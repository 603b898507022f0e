"""
Command-line interface for murmurstream.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .hashing import MurmurDigest, hash_file, new
from .log import get_logger

LOGGER = logging.getLogger(__name__)


def _seed(value: str) -> int:
    try:
        seed = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid seed: {value}") from None
    if seed < 0:
        raise argparse.ArgumentTypeError(f"Seed must be non-negative: {value}")
    return seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="murmurstream", description="Print MurmurHash3 digests of files"
    )
    parser.add_argument(
        "-m",
        "--method",
        default="",
        help='Variant: "32x86" (default, also "32"), "128x86" or "128x64"',
    )
    parser.add_argument("-s", "--seed", type=_seed, default=0, help="Unsigned seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped inputs")
    parser.add_argument("files", nargs="*", help="Files to hash")
    return parser


def digest_file(path: str, method: str, seed: int) -> Optional[MurmurDigest]:
    """Hash one file, returning None when it cannot be read or the method is unknown."""
    try:
        return hash_file(path, seed=seed, variant=method)
    except (OSError, ValueError) as exc:
        LOGGER.debug("Skipping %s: %s", path, exc)
        return None


def dispatch(args: argparse.Namespace, out: TextIO = sys.stdout) -> int:
    if args.verbose:
        get_logger().setLevel(logging.DEBUG)
    try:
        new(args.method, args.seed)
    except ValueError as exc:
        LOGGER.debug("%s; no digests emitted", exc)
        return 0

    for path in args.files:
        result = digest_file(path, args.method, args.seed)
        if result is not None:
            out.write(f"{result.hexdigest()}  {path}\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger()
    return dispatch(args)


__all__ = ["build_parser", "digest_file", "dispatch", "main"]
