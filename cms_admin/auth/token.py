"""Unverified JWT payload helpers.

The signature is never checked here; the backend does that. These are
used only to show who is signed in and to log out once ``exp`` passes.
"""

import base64
import json
import time
from typing import Any


class TokenDecodeError(ValueError):
    pass


def decode_claims(token: str) -> dict[str, Any]:
    """Decode the payload segment of a ``header.payload.signature`` token."""
    parts = (token or "").split(".")
    if len(parts) != 3:
        raise TokenDecodeError("Token must have three dot-separated segments")
    segment = parts[1]
    segment += "=" * (-len(segment) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(segment))
    except (ValueError, TypeError) as e:
        raise TokenDecodeError(f"Unreadable token payload: {e}") from e
    if not isinstance(claims, dict):
        raise TokenDecodeError("Token payload is not an object")
    return claims


def is_token_expired(token: str, now: float | None = None) -> bool:
    """True once ``now`` reaches ``exp``. Unreadable tokens count as expired."""
    now_ms = (now if now is not None else time.time()) * 1000
    try:
        exp = decode_claims(token)["exp"]
        return now_ms >= float(exp) * 1000
    except (TokenDecodeError, KeyError, TypeError, ValueError):
        return True
