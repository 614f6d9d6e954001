"""Signed session tokens carrying the caller's identity claims."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import ExpiredSignatureError, JWTError, jwt

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(days=365)

# Caller claims are embedded verbatim, so only the signature and expiry are enforced
VERIFY_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


class TokenError(Exception):
    """Base class for token verification failures."""


class InvalidToken(TokenError):
    """The token is malformed or its signature does not match."""


class TokenExpired(TokenError):
    """The token's expiry has lapsed."""


def issue(claims: Dict[str, Any], secret: str) -> str:
    """
    Sign the given claims into a session token.

    The claims are embedded verbatim; any ``exp`` or ``iat`` they carry is
    replaced by the issue time and the fixed expiry window.

    Args:
        claims: Identity claims, typically ``{"email": ...}``
        secret: The signing secret

    Returns:
        The encoded token
    """
    issued_at = datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode["iat"] = issued_at
    to_encode["exp"] = issued_at + TOKEN_TTL
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def verify(token: str, secret: str) -> Dict[str, Any]:
    """
    Check a token's signature and expiry and return its claims.

    Raises:
        TokenExpired: The expiry has lapsed
        InvalidToken: The token is malformed or tampered with
    """
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM], options=VERIFY_OPTIONS)
    except ExpiredSignatureError as exc:
        raise TokenExpired(str(exc)) from exc
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc
