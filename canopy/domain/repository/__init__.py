"""Repository interfaces for canopy domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from canopy.domain.repository.notification import NotificationRepository
from canopy.domain.repository.post import PostRepository

__all__ = [
    "NotificationRepository",
    "PostRepository",
]
