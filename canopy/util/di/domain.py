"""Domain layer DI providers."""

from dishka import Scope, provide

from canopy.config import AuthSettings, CommentSettings, NotificationSettings
from canopy.domain.repository import NotificationRepository, PostRepository
from canopy.domain.service import (
    CommentService,
    ForestService,
    JWTService,
    NotificationService,
    PostService,
)
from canopy.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_forest_service(self, post_repository: PostRepository) -> ForestService:
        """Provide comment forest load/save service."""
        return ForestService(post_repository=post_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository, settings=settings
        )

    @provide
    def get_comment_service(
        self,
        forest_service: ForestService,
        notification_service: NotificationService,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            forest_service=forest_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)
