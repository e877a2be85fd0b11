"""JWT token utilities.

Tokens are minted by the sign-in flow, which lives outside this service.
``create_token`` exists for that flow and for tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from canopy.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    ``sub`` is the stable identity (an email); the rest is used to build
    the author snapshot stored on new comments.
    """

    sub: str
    name: str | None = None
    username: str | None = None
    picture: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    identity: str,
    settings: AuthSettings,
    name: str | None = None,
    username: str | None = None,
    picture: str | None = None,
) -> str:
    """Create a JWT token for an identity.

    Args:
        identity: Stable identity (e.g. email)
        settings: Authentication settings
        name: Display name
        username: Username
        picture: Avatar URL

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": identity,
        "name": name,
        "username": username,
        "picture": picture,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
