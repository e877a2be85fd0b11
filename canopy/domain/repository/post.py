"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from canopy.domain.model.comment import CommentNode
from canopy.domain.model.post import Post
from canopy.domain.value import PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    The comment forest is a single field on the post. There is no way to
    update one comment in place: callers read the post, change the forest
    and write all of it back.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise

        Raises:
            PersistenceError: If the store fails or the stored record is malformed
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_comments(
        self,
        post_id: PostId,
        comments: Sequence[CommentNode],
        replies_delta: int = 0,
    ) -> bool:
        """Overwrite the post's comment forest in one atomic update.

        The ``replies`` counter is adjusted by ``replies_delta`` in the same
        statement. Concurrent writers are not coordinated: the last write wins.

        Args:
            post_id: The post ID
            comments: The complete forest to store
            replies_delta: Amount to add to the replies counter

        Returns:
            True if the post existed and was updated, False otherwise

        Raises:
            PersistenceError: If the store fails
        """
        pass
