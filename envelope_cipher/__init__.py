"""
envelope_cipher
===============
AES-256 envelope encryption with caller-owned keys.

Components:
    SymmetricCipher      — AES-256-CBC + PKCS#7, envelope = iv(16) || ciphertext
    AuthenticatedCipher  — AES-256-GCM, envelope = nonce(12) || ciphertext || tag(16)
    keys                 — CSPRNG key / IV generation
    keysource            — base64 / environment key loading

Keys are always passed in explicitly; nothing in the package keeps one.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import (
    CipherError,
    InvalidKeyLength,
    InvalidIVLength,
    EnvelopeTooShort,
    PaddingValidationError,
    IntegrityError,
    EnvelopeEncodingError,
    KeyNotConfigured,
    RandomSourceUnavailable,
)
from .keys                import generate_key, generate_iv
from .modes.cbc           import SymmetricCipher
from .modes.gcm           import AuthenticatedCipher
from .keysource           import key_from_b64, key_to_b64, key_from_env

__all__ = [
    "SymmetricCipher",
    "AuthenticatedCipher",
    "generate_key",
    "generate_iv",
    "key_from_b64",
    "key_to_b64",
    "key_from_env",
    "CipherError",
    "InvalidKeyLength",
    "InvalidIVLength",
    "EnvelopeTooShort",
    "PaddingValidationError",
    "IntegrityError",
    "EnvelopeEncodingError",
    "KeyNotConfigured",
    "RandomSourceUnavailable",
]
