"""Comment forest persistence domain service."""

import logfire

from canopy.domain.error import NotFoundError, PersistenceError
from canopy.domain.model import CommentForest, Post
from canopy.domain.repository import PostRepository
from canopy.domain.value import PostId

from .base import Service


class ForestService(Service):
    """Loads and stores a post's comment forest.

    Every change is read-modify-write of the whole forest. Nothing here
    serializes concurrent requests on the same post, so two overlapping
    mutations race and the later write silently replaces the earlier one.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize forest service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def load(self, post_id: PostId) -> tuple[Post, CommentForest]:
        """Load a post together with its comment forest.

        Args:
            post_id: Post ID

        Returns:
            The post record and a forest built from its comments

        Raises:
            NotFoundError: If the post does not exist
            PersistenceError: If the stored forest is malformed
        """
        with logfire.span("forest_service.load", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            try:
                forest = CommentForest.from_nodes(post.comments)
            except ValueError as e:
                logfire.error(
                    "Stored comment forest is malformed",
                    post_id=str(post_id),
                    error=str(e),
                )
                raise PersistenceError(
                    f"Malformed comment forest on post {post_id}: {e}"
                ) from e

            logfire.debug("Forest loaded", post_id=str(post_id), size=len(forest))
            return post, forest

    async def load_forest(self, post_id: PostId) -> CommentForest:
        """Load just the comment forest of a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        _, forest = await self.load(post_id)
        return forest

    async def save_forest(
        self, post_id: PostId, forest: CommentForest, counter_delta: int = 0
    ) -> None:
        """Overwrite the post's comments and adjust its replies counter.

        Args:
            post_id: Post ID
            forest: Complete forest to store
            counter_delta: Amount to add to the post's replies counter

        Raises:
            NotFoundError: If the post vanished between load and save
            PersistenceError: If the write fails
        """
        with logfire.span(
            "forest_service.save_forest",
            post_id=str(post_id),
            size=len(forest),
            counter_delta=counter_delta,
        ):
            updated = await self.post_repository.update_comments(
                post_id, forest.to_nodes(), replies_delta=counter_delta
            )
            if not updated:
                logfire.warn("Post disappeared before save", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            logfire.info("Forest saved", post_id=str(post_id), size=len(forest))
