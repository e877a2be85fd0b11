"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from canopy.domain.model import CommentNode, Post
from canopy.domain.repository.post import PostRepository
from canopy.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def update_comments(
        self,
        post_id: PostId,
        comments: Sequence[CommentNode],
        replies_delta: int = 0,
    ) -> bool:
        """Replace the comment forest and adjust the counter."""
        post = self._posts.get(post_id)
        if post is None:
            return False

        # Create updated post (since posts are immutable)
        self._posts[post_id] = post.model_copy(
            update={
                "comments": tuple(comments),
                "replies": post.replies + replies_delta,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        return True
