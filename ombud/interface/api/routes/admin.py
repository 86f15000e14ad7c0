"""Administrator moderation routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from ombud.application.usecase.moderation import (
    ReviewComplaintRequest,
    ReviewComplaintResponse,
    ReviewComplaintUseCase,
    ReviewPetitionRequest,
    ReviewPetitionResponse,
    ReviewPetitionUseCase,
)
from ombud.domain.error import DomainError
from ombud.domain.service import JWTService
from ombud.interface.api.auth import require_admin
from ombud.interface.error import to_http_exception

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class StatusUpdateBody(BaseModel):
    """Moderation decision."""

    status: str
    admin_notes: Optional[str] = Field(default=None, max_length=2000)


@router.patch(
    "/complaints/{complaint_id}/status", response_model=ReviewComplaintResponse
)
async def update_complaint_status(
    complaint_id: str,
    body: StatusUpdateBody,
    review_complaint_use_case: FromDishka[ReviewComplaintUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewComplaintResponse:
    """Approve or reject a pending complaint.

    Requires an administrator token.
    """
    require_admin(jwt_service, auth_token)

    try:
        request = ReviewComplaintRequest(
            complaint_id=complaint_id,
            status=body.status,
            admin_notes=body.admin_notes,
        )
        return await review_complaint_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/petitions/{petition_id}/status", response_model=ReviewPetitionResponse)
async def update_petition_status(
    petition_id: str,
    body: StatusUpdateBody,
    review_petition_use_case: FromDishka[ReviewPetitionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewPetitionResponse:
    """Approve, reject or close a petition.

    Requires an administrator token.
    """
    require_admin(jwt_service, auth_token)

    try:
        request = ReviewPetitionRequest(
            petition_id=petition_id,
            status=body.status,
            admin_notes=body.admin_notes,
        )
        return await review_petition_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
