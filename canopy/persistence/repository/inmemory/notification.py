"""In-memory notification repository for testing."""

from typing import List, Sequence

from canopy.domain.model import Notification
from canopy.domain.repository.notification import NotificationRepository
from canopy.domain.value import Identity, NotificationId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Store a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_for_recipient(
        self, identity: Identity, limit: int = 50
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.to_identity == identity
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    async def mark_read(
        self, identity: Identity, notification_ids: Sequence[NotificationId]
    ) -> int:
        """Mark the recipient's own notifications as read."""
        updated = 0
        for notification_id in notification_ids:
            notification = self._notifications.get(notification_id)
            if notification is None or notification.to_identity != identity:
                continue
            self._notifications[notification_id] = notification.model_copy(
                update={"read": True}
            )
            updated += 1
        return updated
