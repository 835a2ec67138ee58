"""
Errors
======
Every validation, decryption and random-source failure derives from
CipherError, a ValueError, so callers can catch the whole family or a
single case. The one exception is AuthenticatedCipher.decrypt_text: bytes
that pass the tag but are not UTF-8 raise UnicodeDecodeError.

None of these messages ever carry key or IV bytes.
"""


class CipherError(ValueError):
    """Base class for envelope_cipher failures."""


class InvalidKeyLength(CipherError):
    """Key is not the required size."""


class InvalidIVLength(CipherError):
    """Caller-supplied IV is not one AES block."""


class EnvelopeTooShort(CipherError):
    """Envelope is shorter than its fixed header."""


class PaddingValidationError(CipherError):
    """
    Decryption produced unusable output.

    Raised for a wrong key, corrupted or tampered ciphertext, a ciphertext
    that is not block aligned, and undecodable text alike. The message is
    the same in every case.
    """


class IntegrityError(CipherError):
    """Authentication tag did not verify."""


class EnvelopeEncodingError(CipherError):
    """Text envelope or key string is not valid base64."""


class KeyNotConfigured(CipherError):
    """No key found in the configured environment variable."""


class RandomSourceUnavailable(CipherError, RuntimeError):
    """The operating system's secure random source could not be read."""
