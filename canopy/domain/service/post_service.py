"""Post domain service."""

from uuid import uuid4

import logfire

from canopy.domain.error import ValidationError
from canopy.domain.model import Post
from canopy.domain.repository import PostRepository
from canopy.domain.value import AuthorSnapshot, PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author: AuthorSnapshot, content: str) -> Post:
        """Create a post with an empty comment forest.

        Args:
            author: Author snapshot of the actor
            content: Post text

        Returns:
            Saved post

        Raises:
            ValidationError: If content is empty after trimming
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Post content is required")

        post = Post(id=PostId(uuid4()), author=author, content=text)
        with logfire.span(
            "post_service.create_post", post_id=str(post.id), identity=author.identity
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post
