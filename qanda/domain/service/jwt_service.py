"""JWT token domain service."""

from uuid import UUID

import logfire

from qanda.config import AuthSettings
from qanda.domain.error import UnauthenticatedError
from qanda.domain.value import AuthenticatedUser, UserId
from qanda.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Turns a bearer token into an explicit ``AuthenticatedUser`` that is then
    handed to use cases; nothing downstream inspects the request.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, name: str | None = None) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            name: Display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), name, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate(self, token: str | None) -> AuthenticatedUser:
        """Resolve the caller identity, failing if there is none.

        Args:
            token: JWT token string (optional)

        Returns:
            Verified caller identity

        Raises:
            UnauthenticatedError: If the token is missing, invalid or expired
        """
        if not token:
            raise UnauthenticatedError()

        try:
            payload = self.verify_token(token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            raise UnauthenticatedError("Invalid or expired token")

        return AuthenticatedUser(user_id=user_id, name=payload.name)

    def identify(self, token: str | None) -> AuthenticatedUser | None:
        """Resolve the caller identity without raising.

        Used by read endpoints that only personalise their output.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller identity if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            return self.authenticate(token)
        except UnauthenticatedError:
            logfire.debug("Invalid token on optional auth, treating as anonymous")
            return None
