"""
SYMMETRIC: AES-256-CBC + PKCS#7
===============================
AES-256 in Cipher Block Chaining mode with PKCS#7 padding.

Every call is stateless: the key is always supplied by the caller, and a
fresh random IV is drawn for each encryption and carried at the front of
the envelope, so encrypting the same plaintext twice yields two different
envelopes.

CBC gives confidentiality only. There is no authentication tag; tampering
is caught only when it happens to break the padding. Use
AuthenticatedCipher (AES-256-GCM) when integrity matters.

Key size: 256 bits (32 bytes)
IV:       128 bits (16 bytes) — random per message
Block:    128 bits

Envelope format: iv(16) || ciphertext

Dependencies: cryptography >= 41.0
"""

import logging

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .. import keys
from ..encoding import TEXT_ENCODING, decode_envelope, encode_envelope
from ..errors import EnvelopeTooShort, InvalidIVLength, PaddingValidationError

logger = logging.getLogger(__name__)

_DECRYPT_FAILED = "Data cannot be decrypted."


class SymmetricCipher:
    """AES-256-CBC with PKCS#7 padding and an IV-prefixed envelope."""

    KEY_SIZE   = keys.KEY_SIZE   # 256-bit key
    IV_SIZE    = keys.IV_SIZE    # 128-bit IV
    BLOCK_SIZE = 128             # AES block, in bits (PKCS#7 unit)

    @staticmethod
    def generate_key(bits: int = keys.KEY_SIZE * 8) -> bytes:
        return keys.generate_key(bits)

    @staticmethod
    def generate_iv() -> bytes:
        return keys.generate_iv()

    @classmethod
    def encrypt(cls, plaintext: bytes, key: bytes, iv: bytes = None) -> bytes:
        """
        Pad and encrypt plaintext under key.
        iv is drawn fresh unless given; pass a fixed one only to reproduce
        known test vectors, never reuse one with the same key.
        Returns: iv || ciphertext
        """
        key = keys.validate_key(key)
        if iv is None:
            iv = keys.generate_iv()
        elif len(iv) != cls.IV_SIZE:
            raise InvalidIVLength(f"IV must be {cls.IV_SIZE} bytes, got {len(iv)}.")
        iv        = bytes(iv)
        plaintext = bytes(plaintext)

        padder = padding.PKCS7(cls.BLOCK_SIZE).padder()
        padded = padder.update(plaintext) + padder.finalize()

        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ct        = encryptor.update(padded) + encryptor.finalize()

        envelope = iv + ct
        logger.debug(f"CBC encrypt: pt={len(plaintext)}B envelope={len(envelope)}B")
        return envelope

    @classmethod
    def decrypt(cls, envelope: bytes, key: bytes) -> bytes:
        """
        Decrypt an envelope produced by encrypt() and strip its padding.
        Raises EnvelopeTooShort below 16 bytes and PaddingValidationError
        for every other failure, with the same message each time.
        """
        key = keys.validate_key(key)
        if len(envelope) < cls.IV_SIZE:
            raise EnvelopeTooShort(f"Envelope must be at least {cls.IV_SIZE} bytes.")
        iv = bytes(envelope[:cls.IV_SIZE])
        ct = bytes(envelope[cls.IV_SIZE:])

        try:
            decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
            padded    = decryptor.update(ct) + decryptor.finalize()
            unpadder  = padding.PKCS7(cls.BLOCK_SIZE).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            raise PaddingValidationError(_DECRYPT_FAILED) from None

        logger.debug(f"CBC decrypt: envelope={len(envelope)}B pt={len(plaintext)}B")
        return plaintext

    @classmethod
    def encrypt_text(cls, text: str, key: bytes) -> str:
        """UTF-8 encode, encrypt, base64. Returns a text-safe envelope."""
        return encode_envelope(cls.encrypt(text.encode(TEXT_ENCODING), key))

    @classmethod
    def decrypt_text(cls, token: str, key: bytes) -> str:
        plaintext = cls.decrypt(decode_envelope(token), key)
        try:
            return plaintext.decode(TEXT_ENCODING)
        except UnicodeDecodeError:
            raise PaddingValidationError(_DECRYPT_FAILED) from None
