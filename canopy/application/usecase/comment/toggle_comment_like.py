"""Toggle comment like use case."""

from uuid import UUID

from pydantic import BaseModel

from canopy.application.usecase.base import BaseUseCase
from canopy.domain.error import AuthenticationRequiredError
from canopy.domain.service import CommentService
from canopy.domain.value import AuthorSnapshot, CommentId, PostId


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    actor: AuthorSnapshot | None  # From the authenticated session


class ToggleCommentLikeResponse(BaseModel):
    """Toggle comment like response."""

    ok: bool = True
    liked: bool
    likes_count: int


class ToggleCommentLikeUseCase(
    BaseUseCase[ToggleCommentLikeRequest, ToggleCommentLikeResponse]
):
    """Use case for liking or unliking a comment at any depth."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize toggle comment like use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: ToggleCommentLikeRequest
    ) -> ToggleCommentLikeResponse:
        """Execute toggle like flow.

        Raises:
            AuthenticationRequiredError: If there is no actor
            NotFoundError: If the post or comment does not exist
        """
        if request.actor is None:
            raise AuthenticationRequiredError("like comments")

        state = await self.comment_service.toggle_like(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            actor=request.actor,
        )
        return ToggleCommentLikeResponse(
            liked=state.liked, likes_count=state.likes_count
        )
