from __future__ import annotations

import struct

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF

_BLOCK_SIZE = 64
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Round constants, one per 16-step quarter.
_K_LEFT = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC)
_K_RIGHT = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x00000000)

# Message word selection.
_R_LEFT = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
)
_R_RIGHT = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
)

# Left-rotation amounts.
_S_LEFT = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
)
_S_RIGHT = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
)


def _rotl(x: int, b: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << b) | (x >> (32 - b))) & _MASK_32


def _f(quarter: int, x: int, y: int, z: int) -> int:
    if quarter == 0:
        return x ^ y ^ z
    if quarter == 1:
        return (x & y) | (~x & z)
    if quarter == 2:
        return ((x | ~y) ^ z) & _MASK_32
    return (x & z) | (y & ~z)


class RIPEMD128:
    """
    Pure-Python RIPEMD-128 implementation with a streaming API.

    The interface mirrors hashlib-style objects. Only the trailing partial
    block is buffered between ``update`` calls, so arbitrarily large inputs
    can be fed in chunks.
    """

    name = "ripemd128"
    digest_size = 16
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b""):
        self._h = _INITIAL_STATE
        self._tail = b""
        self._total_len = 0
        self.update(data)

    def copy(self) -> "RIPEMD128":
        dup = self.__class__.__new__(self.__class__)
        dup._h = self._h
        dup._tail = self._tail
        dup._total_len = self._total_len
        return dup

    def update(self, data: bytes) -> "RIPEMD128":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")

        raw = self._tail + bytes(data)
        self._total_len += len(data)
        self._tail = b""

        offset_limit = len(raw) - (len(raw) % _BLOCK_SIZE)
        for idx in range(0, offset_limit, _BLOCK_SIZE):
            self._compress(struct.unpack_from("<16I", raw, idx))

        self._tail = raw[offset_limit:]
        return self

    def digest(self) -> bytes:
        return self.copy()._finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return int.from_bytes(self.digest(), byteorder="little", signed=False)

    # Internal helpers -------------------------------------------------
    def _compress(self, x) -> None:
        h0, h1, h2, h3 = self._h
        a1, b1, c1, d1 = h0, h1, h2, h3
        a2, b2, c2, d2 = h0, h1, h2, h3

        for j in range(64):
            quarter = j >> 4

            t = (a1 + _f(quarter, b1, c1, d1) + x[_R_LEFT[j]] + _K_LEFT[quarter]) & _MASK_32
            a1, d1, c1, b1 = d1, c1, b1, _rotl(t, _S_LEFT[j])

            # The right line walks the boolean functions in reverse order.
            t = (a2 + _f(3 - quarter, b2, c2, d2) + x[_R_RIGHT[j]] + _K_RIGHT[quarter]) & _MASK_32
            a2, d2, c2, b2 = d2, c2, b2, _rotl(t, _S_RIGHT[j])

        self._h = (
            (h1 + c1 + d2) & _MASK_32,
            (h2 + d1 + a2) & _MASK_32,
            (h3 + a1 + b2) & _MASK_32,
            (h0 + b1 + c2) & _MASK_32,
        )

    def _finalize(self) -> bytes:
        # 0x80, zero fill up to 56 mod 64, then the bit length little-endian.
        pad_len = (55 - len(self._tail)) % _BLOCK_SIZE
        final = (
            self._tail
            + b"\x80"
            + b"\x00" * pad_len
            + struct.pack("<Q", (self._total_len * 8) & _MASK_64)
        )
        for idx in range(0, len(final), _BLOCK_SIZE):
            self._compress(struct.unpack_from("<16I", final, idx))
        return struct.pack("<4I", *self._h)


def ripemd128(data: bytes = b"") -> RIPEMD128:
    """Convenience constructor matching hashlib-style usage."""
    return RIPEMD128(data)


def ripemd128_digest(data: bytes) -> bytes:
    """Return the 16-byte RIPEMD-128 digest of ``data`` in one shot."""
    return RIPEMD128(data).digest()
