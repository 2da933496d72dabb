from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF

BLOCK_SIZE = 64
KEY_SIZES = (16, 32)
NONCE_SIZE = 8
DEFAULT_ROUNDS = 20

SIGMA = struct.unpack("<4I", b"expand 32-byte k")
TAU = struct.unpack("<4I", b"expand 16-byte k")

# (target, a, b, shift): x[target] ^= rotl(x[a] + x[b], shift).
# Columns of the 4x4 state first, then rows.
_COLUMN_ROUND = (
    (4, 0, 12, 7), (8, 4, 0, 9), (12, 8, 4, 13), (0, 12, 8, 18),
    (9, 5, 1, 7), (13, 9, 5, 9), (1, 13, 9, 13), (5, 1, 13, 18),
    (14, 10, 6, 7), (2, 14, 10, 9), (6, 2, 14, 13), (10, 6, 2, 18),
    (3, 15, 11, 7), (7, 3, 15, 9), (11, 7, 3, 13), (15, 11, 7, 18),
)
_ROW_ROUND = (
    (1, 0, 3, 7), (2, 1, 0, 9), (3, 2, 1, 13), (0, 3, 2, 18),
    (6, 5, 4, 7), (7, 6, 5, 9), (4, 7, 6, 13), (5, 4, 7, 18),
    (11, 10, 9, 7), (8, 11, 10, 9), (9, 8, 11, 13), (10, 9, 8, 18),
    (12, 15, 14, 7), (13, 12, 15, 9), (14, 13, 12, 13), (15, 14, 13, 18),
)
_DOUBLE_ROUND = _COLUMN_ROUND + _ROW_ROUND


class Salsa20Error(ValueError):
    """Base class for Salsa20 construction failures."""


class InvalidKeySize(Salsa20Error):
    """Raised when the key is neither 16 nor 32 bytes long."""


class InvalidNonceSize(Salsa20Error):
    """Raised when the nonce is not exactly 8 bytes long."""


class InvalidRounds(Salsa20Error):
    """Raised when the round count is not a positive even integer."""


@dataclass(frozen=True)
class KeySchedule:
    """Expanded key words plus the constant set chosen by the key size."""

    key_size: int
    words: Tuple[int, ...]
    constants: Tuple[int, ...]


def expand_key(key: bytes) -> KeySchedule:
    """
    Expand a 16- or 32-byte key into eight key words and its constants.

    A 32-byte key maps directly onto the eight words and uses the
    "expand 32-byte k" constants. A 16-byte key fills the first four words
    and is repeated into the last four, with the "expand 16-byte k" constants.

    Raises:
        TypeError: If key is not bytes-like
        InvalidKeySize: If key is not 16 or 32 bytes long
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError("key must be bytes-like")
    key_bytes = bytes(key)
    if len(key_bytes) == 32:
        return KeySchedule(32, struct.unpack("<8I", key_bytes), SIGMA)
    if len(key_bytes) == 16:
        half = struct.unpack("<4I", key_bytes)
        return KeySchedule(16, half + half, TAU)
    raise InvalidKeySize(
        f"Salsa20 key must be 16 or 32 bytes, got {len(key_bytes)}"
    )


def _rotl(x: int, b: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << b) | (x >> (32 - b))) & _MASK_32


def _check_counter(counter: int) -> int:
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise TypeError(f"counter must be an int, got {type(counter).__name__}")
    return counter & _MASK_64


class Salsa20:
    """
    Pure-Python Salsa20 stream cipher.

    Encryption and decryption are the same operation: ``process`` XORs the
    input with the keystream and advances the block counter by one for every
    64-byte window consumed, a trailing partial window included. The counter
    persists across calls, so feeding a stream in chunks gives the same
    output as feeding it at once.

    Instances hold a mutable counter and are not safe to share between
    threads; use one instance per logical stream.
    """

    def __init__(
        self,
        key: bytes,
        nonce: bytes,
        counter: int = 0,
        rounds: int = DEFAULT_ROUNDS,
    ):
        schedule = expand_key(key)

        if not isinstance(nonce, (bytes, bytearray, memoryview)):
            raise TypeError("nonce must be bytes-like")
        nonce_bytes = bytes(nonce)
        if len(nonce_bytes) != NONCE_SIZE:
            raise InvalidNonceSize(
                f"Salsa20 nonce must be {NONCE_SIZE} bytes, got {len(nonce_bytes)}"
            )

        if isinstance(rounds, bool) or not isinstance(rounds, int):
            raise InvalidRounds(f"rounds must be an integer, got {rounds!r}")
        if rounds <= 0 or rounds % 2:
            raise InvalidRounds(f"rounds must be positive and even, got {rounds}")

        self._schedule = schedule
        self._nonce = struct.unpack("<2I", nonce_bytes)
        self._rounds = rounds
        self._counter = _check_counter(counter)
        logger.debug(
            "Salsa20 initialised: key_size=%d rounds=%d counter=%d",
            schedule.key_size,
            rounds,
            self._counter,
        )

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def key_size(self) -> int:
        return self._schedule.key_size

    def process(self, data: bytes) -> bytes:
        """XOR ``data`` with the keystream and return a same-length result."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")
        raw = bytes(data)

        out = bytearray()
        counter = self._counter
        for offset in range(0, len(raw), BLOCK_SIZE):
            chunk = raw[offset:offset + BLOCK_SIZE]
            size = len(chunk)
            stream = self._keystream_block(counter)[:size]
            mixed = int.from_bytes(chunk, "little") ^ int.from_bytes(stream, "little")
            out += mixed.to_bytes(size, "little")
            counter = (counter + 1) & _MASK_64

        self._counter = counter
        return bytes(out)

    encrypt = process
    decrypt = process

    def keystream(self, length: int) -> bytes:
        """Return the next ``length`` keystream bytes, advancing the counter."""
        return self.process(bytes(length))

    def seek(self, counter: int) -> None:
        """
        Move to block ``counter``; the value wraps modulo 2**64.

        Raises:
            TypeError: If counter is not an int
        """
        self._counter = _check_counter(counter)
        logger.debug("Salsa20 seek: counter=%d", self._counter)

    # Internal helpers -------------------------------------------------
    def _keystream_block(self, counter: int) -> bytes:
        k = self._schedule.words
        c = self._schedule.constants
        n = self._nonce
        state = [
            c[0], k[0], k[1], k[2],
            k[3], c[1], n[0], n[1],
            counter & _MASK_32, (counter >> 32) & _MASK_32, c[2], k[4],
            k[5], k[6], k[7], c[3],
        ]

        x = list(state)
        for _ in range(self._rounds // 2):
            for target, a, b, shift in _DOUBLE_ROUND:
                x[target] ^= _rotl((x[a] + x[b]) & _MASK_32, shift)

        return struct.pack(
            "<16I", *((xi + si) & _MASK_32 for xi, si in zip(x, state))
        )


def salsa20(
    key: bytes,
    nonce: bytes,
    counter: int = 0,
    rounds: int = DEFAULT_ROUNDS,
) -> Salsa20:
    """Convenience constructor mirroring ``ripemd128``."""
    return Salsa20(key, nonce, counter=counter, rounds=rounds)
