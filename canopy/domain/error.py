"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (empty or malformed content)."""

    pass


class AuthenticationRequiredError(DomainError):
    """Raised when a mutation arrives without an actor identity."""

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Authentication required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an actor attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, identity: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{identity} is not authorized to modify {resource} {resource_id}"
        )


class PersistenceError(DomainError):
    """Underlying store unavailable, timed out, or returned malformed data.

    The message carries internal detail for server-side logs only.
    """

    pass


class NotificationError(DomainError):
    """Best-effort notification could not be recorded."""

    pass
