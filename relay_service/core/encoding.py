"""Opaque token encoding shared by cursors and global IDs.

Tokens are base64 strings wrapping a UTF-8 payload. They carry no meaning
for clients; the payload shape is validated by whoever decodes it.
"""

from __future__ import annotations

import base64 as _b64
import logging

logger = logging.getLogger(__name__)

# URL-safe alphabet characters mapped back to the standard alphabet
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def base64(payload: str) -> str:
    """Encode a UTF-8 string as a standard-alphabet base64 token."""
    return _b64.b64encode(payload.encode("utf-8")).decode("ascii")


def unbase64(token: str) -> str:
    """Decode a token produced by :func:`base64`.

    Decoding is lenient: both the standard and URL-safe alphabets are
    accepted and missing padding is restored. Tokens that cannot be decoded
    at all yield an empty string and invalid UTF-8 sequences are replaced,
    so foreign input never raises here.

    Args:
        token: Opaque token received from a client.

    Returns:
        The decoded payload, or garbage text for tokens that were not
        produced by :func:`base64`.
    """
    normalized = token.strip().translate(_URLSAFE_TO_STANDARD)
    normalized += "=" * (-len(normalized) % 4)
    try:
        raw = _b64.b64decode(normalized)
    except ValueError:
        logger.debug("Discarding undecodable opaque token", extra={"token": token})
        return ""
    return raw.decode("utf-8", errors="replace")


__all__ = ["base64", "unbase64"]
