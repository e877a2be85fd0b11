"""Post aggregate root.

A post owns its entire comment forest as one embedded value. There is no
separate comment table: every comment change rewrites ``comments`` whole.
"""

from datetime import datetime, timezone

from pydantic import Field

from canopy.domain.model.comment import CommentNode
from canopy.domain.model.common import DomainModel
from canopy.domain.value import AuthorSnapshot, PostId


class Post(DomainModel):
    """Post aggregate root.

    ``replies`` is a denormalized counter. It tracks top-level comments only
    (nested replies never touch it, and deleting a top-level comment takes
    off exactly one however many replies went with it), so it is not the
    size of the tree.
    """

    id: PostId
    author: AuthorSnapshot
    content: str = Field(min_length=1, max_length=10000)
    comments: tuple[CommentNode, ...] = ()
    replies: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
