"""Interface layer error mapping."""

import logfire
from fastapi import HTTPException, status

from canopy.domain.error import (
    AuthenticationRequiredError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def to_http_exception(error: DomainError, action: str) -> HTTPException:
    """Translate a domain error into the HTTP error returned to clients.

    Persistence failures are logged with their detail and reported to the
    client with a generic message only.

    Args:
        error: Domain error raised by a use case
        action: Short description of the attempted action, used in 500 details
    """
    if isinstance(error, AuthenticationRequiredError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, ForbiddenError):
        logfire.warn("Forbidden modification attempt", error=str(error))
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to modify this {error.resource}",
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, PersistenceError):
        logfire.error(
            "Persistence failure", action=action, error=str(error)
        )
    else:
        logfire.error(
            "Unexpected domain error",
            action=action,
            error=str(error),
            error_type=type(error).__name__,
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


def invalid_request(error: ValueError) -> HTTPException:
    """400 for malformed identifiers and other unparseable input."""
    logfire.warn("Invalid request", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
