"""
Key source
==========
The cipher classes never hold a key of their own; storing and rotating
keys belongs to the caller. These helpers cover the common case of a key
kept as a base64 string, in configuration or in an environment variable.
"""

import os
import logging

from .encoding import decode_envelope, encode_envelope
from .errors import EnvelopeEncodingError, KeyNotConfigured
from .keys import validate_key

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR = "ENVELOPE_CIPHER_KEY"


def key_to_b64(key: bytes) -> str:
    return encode_envelope(validate_key(key))


def key_from_b64(value: str) -> bytes:
    """Decode a base64 key string and check it is 32 bytes."""
    try:
        raw = decode_envelope(value.strip())
    except EnvelopeEncodingError:
        raise EnvelopeEncodingError("Key is not valid base64.") from None
    return validate_key(raw)


def key_from_env(name: str = DEFAULT_ENV_VAR) -> bytes:
    value = os.environ.get(name)
    if not value:
        raise KeyNotConfigured(f"{name} environment variable not set.")
    logger.debug(f"Loaded key from ${name}")
    return key_from_b64(value)
