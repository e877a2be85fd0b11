"""JWT token domain service."""

import logfire

from canopy.config import AuthSettings
from canopy.domain.value import AuthorSnapshot
from canopy.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    This is the identity collaborator: it turns a session token into the
    already-authenticated actor the comment operations trust.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

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
                logfire.info("JWT token verified", identity=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> AuthorSnapshot | None:
        """Resolve the acting user from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Author snapshot if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        try:
            return AuthorSnapshot.from_claims(
                identity=payload.sub,
                name=payload.name,
                username=payload.username,
                avatar_url=payload.picture,
            )
        except ValueError as e:
            logfire.warn("Token carries an unusable identity", error=str(e))
            return None
