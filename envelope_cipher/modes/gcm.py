"""
AUTHENTICATED: AES-256-GCM
==========================
AES-256 in Galois/Counter Mode, for callers that need integrity as well
as confidentiality.

Same explicit-key, stateless API as SymmetricCipher, but GCM appends a
128-bit authentication tag: any change to the ciphertext, nonce or
associated data is rejected with IntegrityError instead of depending on
a padding failure.

Key size: 256 bits (32 bytes)
Nonce:    96 bits (12 bytes) — randomly generated per message
Tag:      128 bits (16 bytes)

Envelope format: nonce(12) || ciphertext || tag(16)

Dependencies: cryptography >= 41.0
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .. import keys
from ..encoding import TEXT_ENCODING, decode_envelope, encode_envelope
from ..errors import EnvelopeTooShort, IntegrityError

logger = logging.getLogger(__name__)


class AuthenticatedCipher:
    """AES-256-GCM authenticated encryption with a nonce-prefixed envelope."""

    KEY_SIZE   = keys.KEY_SIZE   # 256-bit key
    NONCE_SIZE = 12              # 96-bit nonce (GCM standard)
    TAG_SIZE   = 16              # 128-bit tag

    @staticmethod
    def generate_key() -> bytes:
        return keys.generate_key()

    @classmethod
    def encrypt(cls, plaintext: bytes, key: bytes, aad: bytes = None) -> bytes:
        """
        Encrypt and authenticate.
        aad = Additional Authenticated Data (covered by the tag, not encrypted).
        Returns: nonce || ciphertext+tag
        """
        key = keys.validate_key(key)
        nonce    = keys.random_bytes(cls.NONCE_SIZE)
        envelope = nonce + AESGCM(key).encrypt(nonce, plaintext, aad)
        logger.debug(f"GCM encrypt: pt={len(plaintext)}B envelope={len(envelope)}B")
        return envelope

    @classmethod
    def decrypt(cls, envelope: bytes, key: bytes, aad: bytes = None) -> bytes:
        """
        Verify the tag and decrypt.
        Raises IntegrityError if the envelope or aad was altered.
        """
        key = keys.validate_key(key)
        if len(envelope) < cls.NONCE_SIZE + cls.TAG_SIZE:
            raise EnvelopeTooShort(
                f"Envelope must be at least {cls.NONCE_SIZE + cls.TAG_SIZE} bytes.")
        nonce = bytes(envelope[:cls.NONCE_SIZE])
        ct    = bytes(envelope[cls.NONCE_SIZE:])
        try:
            plaintext = AESGCM(key).decrypt(nonce, ct, aad)
        except InvalidTag:
            raise IntegrityError("Authentication failed.") from None
        logger.debug(f"GCM decrypt: envelope={len(envelope)}B pt={len(plaintext)}B")
        return plaintext

    @classmethod
    def encrypt_text(cls, text: str, key: bytes, aad: bytes = None) -> str:
        return encode_envelope(cls.encrypt(text.encode(TEXT_ENCODING), key, aad))

    @classmethod
    def decrypt_text(cls, token: str, key: bytes, aad: bytes = None) -> str:
        # Authenticated bytes; UnicodeDecodeError propagates.
        return cls.decrypt(decode_envelope(token), key, aad).decode(TEXT_ENCODING)
