"""Signed caller tokens.

Tokens are HS256 JWTs minted by the identity provider with a shared secret.
Claims: ``user_id`` (UUID string), ``name`` (display name or null), ``iat``
and ``exp``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from qanda.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "exp"]


class TokenPayload(BaseModel):
    """Decoded claims of a verified token."""

    user_id: str
    name: str | None = None
    exp: datetime


class JWTError(Exception):
    """Token could not be verified."""

    pass


def create_token(
    user_id: str,
    name: str | None,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    """Mint a token valid for ``settings.jwt_expiry_days``.

    Args:
        user_id: Subject user ID
        name: Display name, if known
        settings: Authentication settings
        issued_at: Issue time, now when omitted

    Returns:
        Encoded token
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "name": name,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and decode its claims.

    Raises:
        JWTError: If the token is expired, malformed, wrongly signed or
            missing a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token claims")
