"""PostgreSQL implementation of Notification repository."""

from typing import List, Sequence

import logfire
from sqlalchemy import desc, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from canopy.domain.error import NotificationError, PersistenceError
from canopy.domain.model import Notification
from canopy.domain.repository.notification import NotificationRepository
from canopy.domain.value import Identity, NotificationId
from canopy.persistence.mappers import notification_to_dict, row_to_notification
from canopy.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a savepoint.

        The request's transaction also carries the comment write; a failed
        insert is rolled back to the savepoint so that write still commits.
        """
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise NotificationError(
                f"Failed to store notification {notification.id}: {e}"
            ) from e
        return notification

    async def find_for_recipient(
        self, identity: Identity, limit: int = 50
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        with logfire.span(
            "notification_repository.find_for_recipient", identity=identity
        ):
            stmt = (
                select(notifications_table)
                .where(notifications_table.c.to_identity == identity)
                .order_by(desc(notifications_table.c.created_at))
                .limit(limit)
            )
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Failed to load notifications for {identity}: {e}"
                ) from e
            return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def mark_read(
        self, identity: Identity, notification_ids: Sequence[NotificationId]
    ) -> int:
        """Mark the recipient's own notifications as read."""
        if not notification_ids:
            return 0

        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id.in_(list(notification_ids)))
            .where(notifications_table.c.to_identity == identity)
            .values(read=True)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to mark notifications read for {identity}: {e}"
            ) from e
        return result.rowcount
