"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from canopy.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)
from canopy.domain.error import DomainError
from canopy.domain.service import JWTService
from canopy.interface.error import invalid_request, to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications as read."""

    notification_ids: list[str]


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """Get the current user's notifications, newest first.

    Requires authentication.
    """
    actor = jwt_service.get_actor_from_token(auth_token)

    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(identity=actor.identity if actor else None)
        )
    except DomainError as e:
        raise to_http_exception(e, "load notifications")


@router.put("/read", response_model=MarkNotificationsReadResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkNotificationsReadResponse:
    """Mark notifications as read.

    Requires authentication. IDs that belong to someone else are ignored.
    """
    actor = jwt_service.get_actor_from_token(auth_token)

    try:
        return await mark_read_use_case.execute(
            MarkNotificationsReadRequest(
                identity=actor.identity if actor else None,
                notification_ids=request.notification_ids,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "update notifications")
    except ValueError as e:
        raise invalid_request(e)
