"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.model import CommentNode
from canopy.domain.service import CommentService
from canopy.domain.value import AuthorSnapshot, CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    actor: AuthorSnapshot | None  # From the authenticated session
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentNode


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Without a parent the comment goes at the top level of the forest and
        counts towards the post's replies; with one it is nested under that
        comment and the counter stays put.

        Args:
            request: Create comment request

        Returns:
            The new comment

        Raises:
            AuthenticationRequiredError: If there is no actor
            ValidationError: If content is empty
            NotFoundError: If the post or parent comment does not exist
            ValueError: If an ID is not a valid UUID
        """
        if request.actor is None:
            raise AuthenticationRequiredError("create comments")

        post_id = PostId(UUID(request.post_id))

        if request.parent_id:
            comment = await self.comment_service.add_reply(
                post_id=post_id,
                parent_id=CommentId(UUID(request.parent_id)),
                actor=request.actor,
                content=request.content,
            )
        else:
            comment = await self.comment_service.add_comment(
                post_id=post_id,
                actor=request.actor,
                content=request.content,
            )

        return CreateCommentResponse(comment=comment)
