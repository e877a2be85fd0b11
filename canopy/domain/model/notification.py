"""Notification entity."""

from datetime import datetime, timezone

from pydantic import Field

from canopy.domain.model.common import DomainModel
from canopy.domain.value import (
    AuthorSnapshot,
    CommentId,
    Identity,
    NotificationId,
    NotificationType,
    PostId,
)


class Notification(DomainModel):
    """Record telling a user that someone acted on their content."""

    id: NotificationId
    type: NotificationType
    from_user: AuthorSnapshot
    to_identity: Identity
    post_id: PostId
    comment_id: CommentId | None = None
    message: str
    read: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
