"""Domain model entities for canopy."""

from canopy.domain.model.comment import CommentNode
from canopy.domain.model.forest import (
    CommentForest,
    CommentMatch,
    clone_forest,
    find_by_id,
)
from canopy.domain.model.notification import Notification
from canopy.domain.model.post import Post

__all__ = [
    "CommentNode",
    "CommentForest",
    "CommentMatch",
    "Notification",
    "Post",
    "clone_forest",
    "find_by_id",
]
