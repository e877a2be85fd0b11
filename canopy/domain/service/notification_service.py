"""Notification domain service."""

from uuid import uuid4

import logfire

from canopy.config import NotificationSettings
from canopy.domain.model import Notification
from canopy.domain.repository import NotificationRepository
from canopy.domain.value import (
    AuthorSnapshot,
    CommentId,
    Identity,
    NotificationId,
    NotificationType,
    PostId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        settings: NotificationSettings | None = None,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            settings: Notification settings (defaults apply when omitted)
        """
        self.notification_repository = notification_repository
        self.settings = settings or NotificationSettings()

    async def notify(
        self,
        kind: NotificationType,
        actor: AuthorSnapshot,
        to_identity: Identity,
        post_id: PostId,
        message: str,
        comment_id: CommentId | None = None,
    ) -> Notification | None:
        """Record a notification for the author of the affected content.

        Best effort: failures are logged and swallowed so they never undo
        or fail the mutation that triggered them.

        Returns:
            The stored notification, or None if skipped or it failed
        """
        if actor.identity == to_identity:
            return None
        if not self.settings.enabled:
            return None

        with logfire.span(
            "notification_service.notify",
            type=kind.value,
            from_identity=actor.identity,
            to_identity=to_identity,
            post_id=str(post_id),
            comment_id=str(comment_id) if comment_id else None,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=kind,
                from_user=actor,
                to_identity=to_identity,
                post_id=post_id,
                comment_id=comment_id,
                message=message,
            )
            try:
                saved = await self.notification_repository.save(notification)
            except Exception as e:
                logfire.error(
                    "Notification failed",
                    type=kind.value,
                    to_identity=to_identity,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return None

            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                type=kind.value,
            )
            return saved

    async def list_for(self, identity: Identity) -> list[Notification]:
        """Most recent notifications addressed to a user.

        Args:
            identity: Recipient identity

        Returns:
            Notifications, newest first
        """
        with logfire.span("notification_service.list_for", identity=identity):
            notifications = await self.notification_repository.find_for_recipient(
                identity, limit=self.settings.inbox_limit
            )
            logfire.info(
                "Notifications retrieved", identity=identity, count=len(notifications)
            )
            return notifications

    async def mark_read(
        self, identity: Identity, notification_ids: list[NotificationId]
    ) -> int:
        """Mark a user's notifications as read.

        Returns:
            Number of notifications updated
        """
        with logfire.span(
            "notification_service.mark_read",
            identity=identity,
            count=len(notification_ids),
        ):
            updated = await self.notification_repository.mark_read(
                identity, notification_ids
            )
            logfire.info(
                "Notifications marked read", identity=identity, updated=updated
            )
            return updated
