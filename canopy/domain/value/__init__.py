"""Domain value objects for canopy."""

from canopy.domain.value.identifiers import (
    CommentId,
    Identity,
    NotificationId,
    PostId,
)
from canopy.domain.value.types import AuthorSnapshot, LikeState, NotificationType

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "NotificationId",
    "Identity",
    # Types
    "AuthorSnapshot",
    "LikeState",
    "NotificationType",
]
