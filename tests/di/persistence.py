"""Mock persistence providers for testing."""

from dishka import Scope, provide

from canopy.domain.repository import NotificationRepository, PostRepository
from canopy.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryPostRepository,
)
from canopy.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so every request against one container sees
    the same store. Each test builds its own container, which keeps tests
    isolated from each other.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
