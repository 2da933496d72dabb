"""
Pure-Python RIPEMD-128 hashing and Salsa20 stream encryption.
"""

import logging

from .ripemd128 import RIPEMD128, ripemd128, ripemd128_digest
from .salsa20 import (
    InvalidKeySize,
    InvalidNonceSize,
    InvalidRounds,
    Salsa20,
    Salsa20Error,
    salsa20,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RIPEMD128",
    "ripemd128",
    "ripemd128_digest",
    "Salsa20",
    "salsa20",
    "Salsa20Error",
    "InvalidKeySize",
    "InvalidNonceSize",
    "InvalidRounds",
]
