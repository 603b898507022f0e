from __future__ import annotations

import struct

from ._mix import _MASK_64, check_data, check_seed, fmix64, rotl64

_C1 = 0x87C37B91114253D5
_C2 = 0x4CF5AD432745937F
_BLOCK = 16


class Murmur128x64:
    """
    Pure-Python MurmurHash3 x64_128 with a streaming API.

    Two 64-bit lanes; the digest is both lanes serialized little-endian.
    """

    name = "murmur3_128x64"
    digest_size = 16
    block_size = _BLOCK

    def __init__(self, seed: int = 0):
        self._seed = check_seed(seed, _MASK_64)
        self.reset()

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._h1 = self._seed
        self._h2 = self._seed
        self._pending = b""
        self._total_len = 0

    def copy(self) -> "Murmur128x64":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._h1 = self._h1
        dup._h2 = self._h2
        dup._pending = self._pending
        dup._total_len = self._total_len
        return dup

    def update(self, data: bytes) -> "Murmur128x64":
        data = check_data(data)
        self._total_len += len(data)

        offset = 0
        if self._pending:
            offset = _BLOCK - len(self._pending)
            self._pending += data[:offset]
            if len(self._pending) < _BLOCK:
                return self
            self._mix_block(self._pending, 0)
            self._pending = b""

        limit = offset + (len(data) - offset) // _BLOCK * _BLOCK
        for idx in range(offset, limit, _BLOCK):
            self._mix_block(data, idx)

        self._pending = data[limit:]
        return self

    def digest(self) -> bytes:
        return struct.pack("<QQ", *self.copy()._finalize())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return int.from_bytes(self.digest(), byteorder="little", signed=False)

    # Internal helpers -------------------------------------------------
    def _mix_block(self, block: bytes, idx: int) -> None:
        k1, k2 = struct.unpack_from("<QQ", block, idx)
        h1, h2 = self._h1, self._h2

        k1 = (k1 * _C1) & _MASK_64
        k1 = rotl64(k1, 31)
        k1 = (k1 * _C2) & _MASK_64
        h1 ^= k1

        h1 = rotl64(h1, 27)
        h1 = (h1 + h2) & _MASK_64
        h1 = (h1 * 5 + 0x52DCE729) & _MASK_64

        k2 = (k2 * _C2) & _MASK_64
        k2 = rotl64(k2, 33)
        k2 = (k2 * _C1) & _MASK_64
        h2 ^= k2

        h2 = rotl64(h2, 31)
        h2 = (h2 + h1) & _MASK_64
        h2 = (h2 * 5 + 0x38495AB5) & _MASK_64

        self._h1, self._h2 = h1, h2

    def _finalize(self) -> tuple:
        tail = self._pending
        tail_len = self._total_len & 15

        # Lanes are folded highest first; a lane with any tail byte is folded.
        if tail_len > 8:
            k2 = int.from_bytes(tail[8:], "little")
            k2 = (k2 * _C2) & _MASK_64
            k2 = rotl64(k2, 33)
            k2 = (k2 * _C1) & _MASK_64
            self._h2 ^= k2
        if tail_len > 0:
            k1 = int.from_bytes(tail[:8], "little")
            k1 = (k1 * _C1) & _MASK_64
            k1 = rotl64(k1, 31)
            k1 = (k1 * _C2) & _MASK_64
            self._h1 ^= k1

        length = self._total_len & _MASK_64
        h1 = self._h1 ^ length
        h2 = self._h2 ^ length

        h1 = (h1 + h2) & _MASK_64
        h2 = (h2 + h1) & _MASK_64

        h1 = fmix64(h1)
        h2 = fmix64(h2)

        h1 = (h1 + h2) & _MASK_64
        h2 = (h2 + h1) & _MASK_64

        self._h1, self._h2 = h1, h2
        return h1, h2


def murmur128x64(seed: int = 0) -> Murmur128x64:
    """Convenience constructor matching hashlib-style usage."""
    return Murmur128x64(seed)
