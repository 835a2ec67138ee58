"""
Keys & IVs
==========
Key and initialization-vector generation over the operating system's
CSPRNG (os.urandom). There is no fallback to a non-cryptographic generator:
if the OS source is unavailable, RandomSourceUnavailable is raised.

Key:  256 bits (32 bytes) by default
IV:   128 bits (16 bytes) — one AES block, fresh per encryption
"""

import os
import logging

from .errors import InvalidKeyLength, RandomSourceUnavailable

logger = logging.getLogger(__name__)

KEY_SIZE = 32   # 256-bit key
IV_SIZE  = 16   # 128-bit IV (AES block)


def random_bytes(n: int) -> bytes:
    try:
        return os.urandom(n)
    except (OSError, NotImplementedError):
        raise RandomSourceUnavailable("Secure random source unavailable.") from None


def generate_key(bits: int = KEY_SIZE * 8) -> bytes:
    """Return bits // 8 cryptographically secure random bytes."""
    if not isinstance(bits, int) or bits <= 0 or bits % 8:
        raise InvalidKeyLength(f"Key size must be a positive multiple of 8 bits, got {bits!r}.")
    key = random_bytes(bits // 8)
    logger.debug(f"Generated key: {len(key)}B")
    return key


def generate_iv() -> bytes:
    return random_bytes(IV_SIZE)


def validate_key(key) -> bytes:
    """
    Check that key is a 32-byte bytes-like value and return it as bytes.
    Only the length is ever reported back.
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKeyLength(f"AES-256 key must be {KEY_SIZE} bytes, got {type(key).__name__}.")
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(f"AES-256 key must be {KEY_SIZE} bytes, got {len(key)}.")
    return key
