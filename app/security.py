"""
Bearer token handling for restaurant owners.

Tokens are HS256 JWTs whose ``sub`` (or legacy ``user_id``) claim carries the
owner id stored on restaurants.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.config import settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger("menufy.security")


def create_access_token(user_id: str, expires_in: Optional[timedelta] = None) -> str:
    """Issue a signed token for ``user_id``."""
    claims = {"sub": user_id, "iat": datetime.now(timezone.utc)}
    if expires_in is not None:
        claims["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def decode_access_token(token: str) -> str:
    """Return the caller id carried by ``token``.

    Raises:
        UnauthorizedError: expired, malformed or subject-less tokens
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected expired access token")
        raise UnauthorizedError("Token expired", code="TOKEN_EXPIRED")
    except jwt.InvalidTokenError as exc:
        logger.warning("Rejected invalid access token: %s", exc)
        raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")

    user_id = claims.get("sub") or claims.get("user_id")
    if not user_id:
        raise UnauthorizedError("Token has no subject", code="INVALID_TOKEN")
    return str(user_id)
