"""Petition routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from ombud.application.usecase.petition import (
    SignPetitionRequest,
    SignPetitionResponse,
    SignPetitionUseCase,
)
from ombud.domain.error import DomainError
from ombud.domain.service import JWTService
from ombud.interface.api.auth import require_user_id
from ombud.interface.error import to_http_exception

router = APIRouter(prefix="/petitions", tags=["petitions"], route_class=DishkaRoute)


@router.post("/{petition_id}/sign", response_model=SignPetitionResponse)
async def sign_petition(
    petition_id: str,
    sign_petition_use_case: FromDishka[SignPetitionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SignPetitionResponse:
    """Sign a petition.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the petition does not
            exist, 403 if it is not open for signing, 409 if already signed
    """
    user_id = require_user_id(jwt_service, auth_token, "sign a petition")

    try:
        request = SignPetitionRequest(petition_id=petition_id, user_id=user_id)
        return await sign_petition_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
