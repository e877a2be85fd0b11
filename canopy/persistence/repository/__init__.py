"""PostgreSQL repository implementations."""

from canopy.persistence.repository.notification import PostgresNotificationRepository
from canopy.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresNotificationRepository",
    "PostgresPostRepository",
]
