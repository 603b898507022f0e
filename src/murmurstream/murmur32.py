from __future__ import annotations

import struct

from ._mix import _MASK_32, check_data, check_seed, fmix32, rotl32

_C1 = 0xCC9E2D51
_C2 = 0x1B873593
_BLOCK = 4


class Murmur32x86:
    """
    Pure-Python MurmurHash3 x86_32 with a streaming API.

    The interface mirrors hashlib-style objects and returns 4-byte digests.
    ``intdigest()`` is the 32-bit hash value.
    """

    name = "murmur3_32x86"
    digest_size = 4
    block_size = _BLOCK

    def __init__(self, seed: int = 0):
        self._seed = check_seed(seed, _MASK_32)
        self.reset()

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._h1 = self._seed
        self._pending = b""
        self._total_len = 0

    def copy(self) -> "Murmur32x86":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._h1 = self._h1
        dup._pending = self._pending
        dup._total_len = self._total_len
        return dup

    def update(self, data: bytes) -> "Murmur32x86":
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
        return struct.pack("<I", self.copy()._finalize())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self.copy()._finalize()

    # Internal helpers -------------------------------------------------
    def _mix_block(self, block: bytes, idx: int) -> None:
        k1 = struct.unpack_from("<I", block, idx)[0]
        k1 = (k1 * _C1) & _MASK_32
        k1 = rotl32(k1, 15)
        k1 = (k1 * _C2) & _MASK_32

        h1 = self._h1 ^ k1
        h1 = rotl32(h1, 13)
        self._h1 = (h1 * 5 + 0xE6546B64) & _MASK_32

    def _finalize(self) -> int:
        if self._total_len & 3:
            k1 = int.from_bytes(self._pending, "little")
            k1 = (k1 * _C1) & _MASK_32
            k1 = rotl32(k1, 15)
            k1 = (k1 * _C2) & _MASK_32
            self._h1 ^= k1

        self._h1 ^= self._total_len & _MASK_32
        return fmix32(self._h1)


def murmur32x86(seed: int = 0) -> Murmur32x86:
    """Convenience constructor matching hashlib-style usage."""
    return Murmur32x86(seed)
