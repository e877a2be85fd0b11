"""Comment node entity.

A comment and its replies form a tree embedded in the owning post. The
nested shape below is what gets stored and returned over the API; in-memory
mutation goes through ``CommentForest`` instead.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import Field, computed_field, field_serializer

from canopy.domain.error import ValidationError
from canopy.domain.model.common import DomainModel
from canopy.domain.value import AuthorSnapshot, CommentId, Identity

# Default limit; the configured CommentSettings value is enforced on write
MAX_CONTENT_LENGTH = 10000


class CommentNode(DomainModel):
    """One comment plus the replies it owns.

    - id: assigned at creation, never changes
    - author: snapshot taken at creation, only this identity may edit/delete
    - edited_at: set on every successful edit, None otherwise
    - likes: identities that liked the node (a set, order irrelevant)
    - replies: child nodes in insertion (chronological) order
    """

    id: CommentId
    content: str = Field(min_length=1)
    author: AuthorSnapshot
    created_at: datetime
    edited_at: datetime | None = None
    likes: frozenset[Identity] = frozenset()
    replies: tuple["CommentNode", ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def likes_count(self) -> int:
        """Number of distinct identities that liked this node."""
        return len(self.likes)

    @field_serializer("likes")
    def serialize_likes(self, likes: frozenset[Identity]) -> list[str]:
        # Sorted so stored documents are stable across writes
        return sorted(likes)

    @classmethod
    def create(
        cls,
        content: str,
        author: AuthorSnapshot,
        max_length: int = MAX_CONTENT_LENGTH,
    ) -> "CommentNode":
        """Create a fresh node with a new id and no likes or replies.

        Args:
            content: User-supplied text (trimmed before storing)
            author: Author snapshot of the actor
            max_length: Maximum content length after trimming

        Returns:
            New comment node

        Raises:
            ValidationError: If content is empty after trimming or too long
        """
        text = validate_content(content, max_length)
        return cls(
            id=CommentId(uuid4()),
            content=text,
            author=author,
            created_at=datetime.now(timezone.utc),
        )

    def is_authored_by(self, identity: str) -> bool:
        """Whether the given identity wrote this node."""
        return self.author.identity == identity


def validate_content(content: str | None, max_length: int = MAX_CONTENT_LENGTH) -> str:
    """Trim content and check it is usable.

    Raises:
        ValidationError: If content is empty after trimming or too long
    """
    text = (content or "").strip()
    if not text:
        raise ValidationError("Comment content is required")
    if len(text) > max_length:
        raise ValidationError(
            f"Comment content must be at most {max_length} characters"
        )
    return text
