from __future__ import annotations

import struct

from ._mix import _MASK_32, check_data, check_seed, fmix32, rotl32

_C1 = 0x239B961B
_C2 = 0xAB0E9789
_C3 = 0x38B34AE5
_C4 = 0xA1E38B93
_BLOCK = 16


class Murmur128x86:
    """
    Pure-Python MurmurHash3 x86_128 with a streaming API.

    Four 32-bit lanes, each block word mixing into its own lane before the
    lane is chained with the next one. The digest is the four lanes
    serialized little-endian, in lane order.
    """

    name = "murmur3_128x86"
    digest_size = 16
    block_size = _BLOCK

    def __init__(self, seed: int = 0):
        self._seed = check_seed(seed, _MASK_32)
        self.reset()

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._h1 = self._seed
        self._h2 = self._seed
        self._h3 = self._seed
        self._h4 = self._seed
        self._pending = b""
        self._total_len = 0

    def copy(self) -> "Murmur128x86":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._h1 = self._h1
        dup._h2 = self._h2
        dup._h3 = self._h3
        dup._h4 = self._h4
        dup._pending = self._pending
        dup._total_len = self._total_len
        return dup

    def update(self, data: bytes) -> "Murmur128x86":
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
        return struct.pack("<IIII", *self.copy()._finalize())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return int.from_bytes(self.digest(), byteorder="little", signed=False)

    # Internal helpers -------------------------------------------------
    def _mix_block(self, block: bytes, idx: int) -> None:
        k1, k2, k3, k4 = struct.unpack_from("<IIII", block, idx)
        h1, h2, h3, h4 = self._h1, self._h2, self._h3, self._h4

        k1 = (k1 * _C1) & _MASK_32
        k1 = rotl32(k1, 15)
        k1 = (k1 * _C2) & _MASK_32
        h1 ^= k1

        h1 = rotl32(h1, 19)
        h1 = (h1 + h2) & _MASK_32
        h1 = (h1 * 5 + 0x561CCD1B) & _MASK_32

        k2 = (k2 * _C2) & _MASK_32
        k2 = rotl32(k2, 16)
        k2 = (k2 * _C3) & _MASK_32
        h2 ^= k2

        h2 = rotl32(h2, 17)
        h2 = (h2 + h3) & _MASK_32
        h2 = (h2 * 5 + 0x0BCAA747) & _MASK_32

        k3 = (k3 * _C3) & _MASK_32
        k3 = rotl32(k3, 17)
        k3 = (k3 * _C4) & _MASK_32
        h3 ^= k3

        h3 = rotl32(h3, 15)
        h3 = (h3 + h4) & _MASK_32
        h3 = (h3 * 5 + 0x96CD1C35) & _MASK_32

        k4 = (k4 * _C4) & _MASK_32
        k4 = rotl32(k4, 18)
        k4 = (k4 * _C1) & _MASK_32
        h4 ^= k4

        h4 = rotl32(h4, 13)
        h4 = (h4 + h1) & _MASK_32
        h4 = (h4 * 5 + 0x32AC3B17) & _MASK_32

        self._h1, self._h2, self._h3, self._h4 = h1, h2, h3, h4

    def _finalize(self) -> tuple:
        tail = self._pending
        tail_len = self._total_len & 15

        if tail_len > 12:
            k4 = int.from_bytes(tail[12:], "little")
            k4 = (k4 * _C4) & _MASK_32
            k4 = rotl32(k4, 18)
            k4 = (k4 * _C1) & _MASK_32
            self._h4 ^= k4
        if tail_len > 8:
            k3 = int.from_bytes(tail[8:12], "little")
            k3 = (k3 * _C3) & _MASK_32
            k3 = rotl32(k3, 17)
            k3 = (k3 * _C4) & _MASK_32
            self._h3 ^= k3
        if tail_len > 4:
            k2 = int.from_bytes(tail[4:8], "little")
            k2 = (k2 * _C2) & _MASK_32
            k2 = rotl32(k2, 16)
            k2 = (k2 * _C3) & _MASK_32
            self._h2 ^= k2
        if tail_len > 0:
            k1 = int.from_bytes(tail[:4], "little")
            k1 = (k1 * _C1) & _MASK_32
            k1 = rotl32(k1, 15)
            k1 = (k1 * _C2) & _MASK_32
            self._h1 ^= k1

        length = self._total_len & _MASK_32
        h1 = self._h1 ^ length
        h2 = self._h2 ^ length
        h3 = self._h3 ^ length
        h4 = self._h4 ^ length

        h1 = (h1 + h2 + h3 + h4) & _MASK_32
        h2 = (h2 + h1) & _MASK_32
        h3 = (h3 + h1) & _MASK_32
        h4 = (h4 + h1) & _MASK_32

        h1 = fmix32(h1)
        h2 = fmix32(h2)
        h3 = fmix32(h3)
        h4 = fmix32(h4)

        h1 = (h1 + h2 + h3 + h4) & _MASK_32
        h2 = (h2 + h1) & _MASK_32
        h3 = (h3 + h1) & _MASK_32
        h4 = (h4 + h1) & _MASK_32

        self._h1, self._h2, self._h3, self._h4 = h1, h2, h3, h4
        return h1, h2, h3, h4


def murmur128x86(seed: int = 0) -> Murmur128x86:
    """Convenience constructor matching hashlib-style usage."""
    return Murmur128x86(seed)
