"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .forest_service import ForestService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .post_service import PostService

__all__ = [
    "CommentService",
    "ForestService",
    "JWTService",
    "NotificationService",
    "PostService",
    "Service",
]
