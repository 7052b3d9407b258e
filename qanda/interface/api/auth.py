"""Caller identity extraction.

Tokens are read from the Authorization header (Bearer scheme) or, failing
that, from the auth cookie. Verification is delegated to JWTService.
"""

from typing import Optional

from dishka import AsyncContainer
from fastapi import Request

from qanda.domain.service import JWTService
from qanda.domain.value import AuthenticatedUser


def read_token(request: Request, cookie_name: str) -> Optional[str]:
    """Raw token carried by the request, if any."""
    header = request.headers.get("Authorization")
    if header:
        scheme, _, credentials = header.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()

    return request.cookies.get(cookie_name)


def require_user(request: Request, jwt_service: JWTService) -> AuthenticatedUser:
    """Verified caller.

    Raises:
        UnauthenticatedError: If no valid token is present
    """
    token = read_token(request, jwt_service.auth_settings.cookie_name)
    return jwt_service.authenticate(token)


async def current_user(request: Request) -> AuthenticatedUser:
    """Dependency form of require_user.

    FastAPI resolves dependencies before it validates the request body, so
    anonymous writes with a schema-invalid JSON body still fail with 401.
    """
    container: AsyncContainer = request.state.dishka_container
    jwt_service = await container.get(JWTService)
    return require_user(request, jwt_service)


def optional_user(
    request: Request, jwt_service: JWTService
) -> Optional[AuthenticatedUser]:
    """Verified caller, or None for anonymous and invalid tokens."""
    token = read_token(request, jwt_service.auth_settings.cookie_name)
    return jwt_service.identify(token)
