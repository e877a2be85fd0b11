"""Mappers for converting between database rows and domain models.

Rows come back as loosely typed dicts with JSONB documents inside. They
are validated into the strongly typed domain models here, and anything
that does not fit is rejected as a persistence error rather than passed on.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from canopy.domain.error import PersistenceError
from canopy.domain.model import CommentNode, Notification, Post
from canopy.domain.value import (
    AuthorSnapshot,
    CommentId,
    Identity,
    NotificationId,
    NotificationType,
    PostId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model

    Raises:
        PersistenceError: If the row or its comment documents are malformed
    """
    try:
        return Post(
            id=PostId(_uuid(row["id"])),
            author=AuthorSnapshot.model_validate(row["author"]),
            content=row["content"],
            comments=documents_to_comments(row.get("comments") or []),
            replies=row["replies"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
    except (KeyError, TypeError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        raise PersistenceError(f"Malformed post record {row.get('id')}: {e}") from e


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "author": post.author.model_dump(mode="json"),
        "content": post.content,
        "comments": comments_to_documents(post.comments),
        "replies": post.replies,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def documents_to_comments(documents: Sequence[Any]) -> tuple[CommentNode, ...]:
    """Validate stored comment documents into nested CommentNodes.

    Raises:
        PersistenceError: If any document does not match the node shape
    """
    if not isinstance(documents, (list, tuple)):
        raise PersistenceError("Stored comments must be a list")
    try:
        return tuple(CommentNode.model_validate(doc) for doc in documents)
    except PydanticValidationError as e:
        raise PersistenceError(f"Malformed comment document: {e}") from e


def comments_to_documents(comments: Sequence[CommentNode]) -> list[Dict[str, Any]]:
    """Serialize nested CommentNodes to JSON-compatible documents.

    Each node carries its derived ``likes_count`` for readers of the raw
    document. It is ignored and recomputed on read.
    """
    return [node.model_dump(mode="json") for node in comments]


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    try:
        return Notification(
            id=NotificationId(_uuid(row["id"])),
            type=NotificationType(row["type"]),
            from_user=AuthorSnapshot.model_validate(row["from_user"]),
            to_identity=Identity(row["to_identity"]),
            post_id=PostId(_uuid(row["post_id"])),
            comment_id=CommentId(_uuid(row["comment_id"]))
            if row.get("comment_id")
            else None,
            message=row["message"],
            read=row["read"],
            created_at=row["created_at"],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise PersistenceError(
            f"Malformed notification record {row.get('id')}: {e}"
        ) from e


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": notification.id,
        "type": notification.type.value,
        "from_user": notification.from_user.model_dump(mode="json"),
        "to_identity": notification.to_identity,
        "post_id": notification.post_id,
        "comment_id": notification.comment_id,
        "message": notification.message,
        "read": notification.read,
        "created_at": notification.created_at,
    }
