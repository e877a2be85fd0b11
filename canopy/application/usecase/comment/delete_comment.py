"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.service import CommentService
from canopy.domain.value import CommentId, Identity, PostId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    identity: Identity | None  # Current user (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    ok: bool = True
    removed: int  # The comment plus every reply beneath it


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            AuthenticationRequiredError: If there is no actor
            NotFoundError: If the post or comment does not exist
            ForbiddenError: If the actor doesn't own the comment
        """
        if request.identity is None:
            raise AuthenticationRequiredError("delete comments")

        removed = await self.comment_service.delete_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            identity=request.identity,
        )
        return DeleteCommentResponse(removed=removed)
