"""Strongly typed identifiers for canopy domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Entity identifiers
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)

# Stable opaque actor identity supplied by the auth layer (e.g. an email)
Identity = NewType("Identity", str)
