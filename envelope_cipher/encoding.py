"""
Text-safe envelopes
===================
Envelopes are raw bytes; for storage, transport or display they are
carried as standard base64 (RFC 4648, '+/' alphabet, '=' padding).

Plaintext text is always encoded as UTF-8 without a BOM.
"""

import base64
import binascii
from typing import Union

from .errors import EnvelopeEncodingError

TEXT_ENCODING = "utf-8"


def encode_envelope(envelope: bytes) -> str:
    """Base64-encode envelope bytes -> ASCII str."""
    return base64.b64encode(envelope).decode("ascii")


def decode_envelope(token: Union[str, bytes]) -> bytes:
    """Strict base64 decode; rejects characters outside the alphabet."""
    try:
        if isinstance(token, str):
            token = token.encode("ascii")
        return base64.b64decode(token, validate=True)
    except (UnicodeEncodeError, binascii.Error):
        raise EnvelopeEncodingError("Envelope is not valid base64.") from None
