"""Update comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.service import CommentService
from canopy.domain.value import CommentId, Identity, PostId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    identity: Identity | None  # Current user (must be author)
    content: str  # New content (cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    ok: bool = True
    comment_id: str
    edited_at: datetime | None


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            AuthenticationRequiredError: If there is no actor
            NotFoundError: If the post or comment does not exist
            ForbiddenError: If the actor doesn't own the comment
            ValidationError: If content is empty
        """
        if request.identity is None:
            raise AuthenticationRequiredError("edit comments")

        node = await self.comment_service.edit_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            identity=request.identity,
            content=request.content,
        )
        return UpdateCommentResponse(comment_id=str(node.id), edited_at=node.edited_at)
