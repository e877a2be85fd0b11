"""Get post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import NotFoundError
from canopy.domain.model import CommentNode
from canopy.domain.service import PostService
from canopy.domain.value import AuthorSnapshot, PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(BaseModel):
    """Get post response."""

    post_id: str
    author: AuthorSnapshot
    content: str
    replies: int
    comments: list[CommentNode]
    created_at: datetime
    updated_at: datetime


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for reading a single post with its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(UUID(request.post_id)))
        if post is None:
            raise NotFoundError("Post", request.post_id)

        return GetPostResponse(
            post_id=str(post.id),
            author=post.author,
            content=post.content,
            replies=post.replies,
            comments=list(post.comments),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
