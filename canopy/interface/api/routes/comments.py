"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from canopy.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeResponse,
    ToggleCommentLikeUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from canopy.domain.error import DomainError
from canopy.domain.service import JWTService
from canopy.interface.error import invalid_request, to_http_exception

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    # Trimming and the length limit are enforced by the domain
    content: str = Field(max_length=20000)
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(max_length=20000)


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the nested comment forest of a post.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Top-level comments in order, each with its replies nested
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e, "load comments")
    except ValueError as e:
        raise invalid_request(e)


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a post, or reply to a comment when ``parent_id`` is set.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created comment

    Raises:
        HTTPException: If not authenticated, not found, or validation fails
    """
    actor = jwt_service.get_actor_from_token(auth_token)

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            actor=actor,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "create comment")
    except ValueError as e:
        raise invalid_request(e)


@router.patch("/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the comment author can edit.

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    actor = jwt_service.get_actor_from_token(auth_token)

    try:
        use_case_request = UpdateCommentRequest(
            post_id=post_id,
            comment_id=comment_id,
            identity=actor.identity if actor else None,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "update comment")
    except ValueError as e:
        raise invalid_request(e)


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply beneath it.

    Only the comment author can delete.
    """
    actor = jwt_service.get_actor_from_token(auth_token)

    try:
        use_case_request = DeleteCommentRequest(
            post_id=post_id,
            comment_id=comment_id,
            identity=actor.identity if actor else None,
        )
        return await delete_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "delete comment")
    except ValueError as e:
        raise invalid_request(e)


@router.post(
    "/{post_id}/comments/{comment_id}/like", response_model=ToggleCommentLikeResponse
)
async def toggle_comment_like(
    post_id: str,
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleCommentLikeResponse:
    """Like a comment, or remove the like if already present.

    Requires authentication.
    """
    actor = jwt_service.get_actor_from_token(auth_token)

    try:
        use_case_request = ToggleCommentLikeRequest(
            post_id=post_id, comment_id=comment_id, actor=actor
        )
        return await toggle_like_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "toggle like")
    except ValueError as e:
        raise invalid_request(e)
