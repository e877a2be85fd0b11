"""Domain value objects for canopy.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field, field_validator

from canopy.domain.value.common import ValueObject
from canopy.domain.value.identifiers import Identity


class NotificationType(str, Enum):
    """Kind of activity a notification reports."""

    COMMENT = "comment"  # New top-level comment on your post
    COMMENT_REPLY = "comment_reply"  # Reply to your comment
    COMMENT_LIKE = "comment_like"  # Like on your comment


class AuthorSnapshot(ValueObject):
    """Denormalized author details captured when content is created.

    This is a copy, not a reference: later profile changes do not
    propagate into comments that were already written.
    """

    identity: Identity
    name: str = "Someone"
    username: str = ""
    avatar_url: str | None = None

    @field_validator("identity")
    @classmethod
    def validate_identity(cls, v: str) -> str:
        """Validate identity is not blank."""
        if not v or not v.strip():
            raise ValueError("Identity must not be empty")
        if len(v) > 255:
            raise ValueError("Identity must be at most 255 characters")
        return v

    @classmethod
    def from_claims(
        cls,
        identity: str,
        name: str | None = None,
        username: str | None = None,
        avatar_url: str | None = None,
    ) -> "AuthorSnapshot":
        """Build a snapshot from authentication claims.

        Username falls back to the lowercased name without whitespace,
        then to the local part of the identity.
        """
        if not username:
            if name:
                username = "".join(name.lower().split())
            else:
                username = identity.split("@")[0]
        return cls(
            identity=Identity(identity),
            name=name or "Someone",
            username=username,
            avatar_url=avatar_url or None,
        )


class LikeState(ValueObject):
    """Outcome of a like toggle."""

    liked: bool
    likes_count: int = Field(ge=0)
