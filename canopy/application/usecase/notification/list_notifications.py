"""List notifications use case."""

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.model import Notification
from canopy.domain.service import NotificationService
from canopy.domain.value import Identity


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    identity: Identity | None  # Current user


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[Notification]
    unread: int


class ListNotificationsUseCase(
    BaseUseCase[ListNotificationsRequest, ListNotificationsResponse]
):
    """Use case for reading the current user's notification inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Raises:
            AuthenticationRequiredError: If there is no actor
        """
        if request.identity is None:
            raise AuthenticationRequiredError("read notifications")

        notifications = await self.notification_service.list_for(request.identity)
        return ListNotificationsResponse(
            notifications=notifications,
            unread=sum(1 for n in notifications if not n.read),
        )
