"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.model import CommentNode
from canopy.domain.service import CommentService
from canopy.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentNode]


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for reading a post's nested comment forest."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))
        comments = await self.comment_service.get_comments(post_id)
        return GetCommentsResponse(post_id=request.post_id, comments=list(comments))
