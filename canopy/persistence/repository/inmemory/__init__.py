"""In-memory repository implementations for testing."""

from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
]
