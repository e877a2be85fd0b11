"""Mark notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.service import NotificationService
from canopy.domain.value import Identity, NotificationId


class MarkNotificationsReadRequest(BaseModel):
    """Mark notifications read request."""

    identity: Identity | None  # Current user
    notification_ids: list[str]  # UUID strings


class MarkNotificationsReadResponse(BaseModel):
    """Mark notifications read response."""

    ok: bool = True
    updated: int


class MarkNotificationsReadUseCase(
    BaseUseCase[MarkNotificationsReadRequest, MarkNotificationsReadResponse]
):
    """Use case for marking the current user's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notifications read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationsReadRequest
    ) -> MarkNotificationsReadResponse:
        """Execute mark read flow.

        Ids belonging to other users are ignored.

        Raises:
            AuthenticationRequiredError: If there is no actor
            ValueError: If an ID is not a valid UUID
        """
        if request.identity is None:
            raise AuthenticationRequiredError("update notifications")

        ids = [NotificationId(UUID(nid)) for nid in request.notification_ids]
        updated = await self.notification_service.mark_read(request.identity, ids)
        return MarkNotificationsReadResponse(updated=updated)
