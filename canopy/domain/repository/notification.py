"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from canopy.domain.model.notification import Notification
from canopy.domain.value import Identity, NotificationId


class NotificationRepository(ABC):
    """Repository for Notification records."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Store a notification.

        Raises:
            NotificationError: If the record could not be written
        """
        pass

    @abstractmethod
    async def find_for_recipient(
        self, identity: Identity, limit: int = 50
    ) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            identity: Recipient identity
            limit: Maximum number of notifications to return

        Returns:
            Notifications addressed to the identity
        """
        pass

    @abstractmethod
    async def mark_read(
        self, identity: Identity, notification_ids: Sequence[NotificationId]
    ) -> int:
        """Mark notifications as read.

        Only notifications addressed to ``identity`` are touched.

        Returns:
            Number of notifications updated
        """
        pass
