"""
Security helpers for the client side of the session.

Covers idempotency key generation for booking/payment submissions and
inspection of the bearer token handed out by the backend. Tokens are only
read here, never verified: signature checks belong to the server.
"""

import secrets
import string
import time
from typing import Any, Callable, Dict, Optional

import jwt

from stayhub.config.logging import get_logger

logger = get_logger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _random_base36(length: int) -> str:
    return ''.join(secrets.choice(_BASE36_ALPHABET) for _ in range(length))


def generate_idempotency_key(
    prefix: str,
    clock: Callable[[], float] = time.time,
) -> str:
    """
    Generate a client-side idempotency key.

    The format is ``<prefix>_<epoch milliseconds>_<9 base36 characters>``,
    e.g. ``payment_1704067200000_k3j9x0a1b``.

    Args:
        prefix: Key namespace (``payment`` or ``booking``)
        clock: Time source returning epoch seconds

    Returns:
        The idempotency key
    """
    return f"{prefix}_{int(clock() * 1000)}_{_random_base36(9)}"


def is_valid_token_format(token: Optional[str]) -> bool:
    """Check a token has three non-empty dot separated segments"""
    if not token or not isinstance(token, str):
        return False
    parts = token.split('.')
    return len(parts) == 3 and all(len(part) > 0 for part in parts)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode a JWT payload without verifying its signature.

    Returns:
        The payload claims, or None when the token cannot be decoded
    """
    if not is_valid_token_format(token):
        return None
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.warning("Token decode error", extra={"error_type": type(e).__name__})
        return None


def is_token_expired(token: str, now: Optional[float] = None, strict: bool = True) -> bool:
    """
    Check whether a token's ``exp`` claim lies in the past.

    Args:
        token: Bearer token
        now: Epoch seconds to compare against (defaults to the current time)
        strict: When True, undecodable tokens and tokens without a readable
            ``exp`` count as expired; when False they are kept
    """
    payload = decode_token(token)
    if not payload or payload.get("exp") is None:
        return strict
    current_time = now if now is not None else time.time()
    try:
        return float(payload["exp"]) < current_time
    except (TypeError, ValueError):
        return strict


def user_id_from_token(token: str) -> Optional[int]:
    """Read the user id claim (``userId``, ``user_id`` or ``sub``) from a token"""
    payload = decode_token(token) or {}
    for claim in ("userId", "user_id", "sub"):
        value = payload.get(claim)
        if value is None:
            continue
        try:
            return int(value)
        except (TypeError, ValueError):
            continue
    return None


__all__ = [
    "generate_idempotency_key",
    "is_valid_token_format",
    "decode_token",
    "is_token_expired",
    "user_id_from_token",
]
