"""Create post use case."""

from datetime import datetime

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.service import PostService
from canopy.domain.value import AuthorSnapshot


class CreatePostRequest(BaseModel):
    """Create post request."""

    content: str
    actor: AuthorSnapshot | None  # From the authenticated session


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str
    author: AuthorSnapshot
    content: str
    replies: int
    created_at: datetime


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a post that comments can attach to."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            AuthenticationRequiredError: If there is no actor
            ValidationError: If content is empty
        """
        if request.actor is None:
            raise AuthenticationRequiredError("create posts")

        post = await self.post_service.create_post(request.actor, request.content)
        return CreatePostResponse(
            post_id=str(post.id),
            author=post.author,
            content=post.content,
            replies=post.replies,
            created_at=post.created_at,
        )
