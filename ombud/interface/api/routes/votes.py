"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from ombud.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from ombud.domain.error import DomainError
from ombud.domain.service import JWTService
from ombud.domain.value import VoteDirection
from ombud.interface.api.auth import require_user_id
from ombud.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


async def _cast_vote(
    complaint_id: str,
    direction: str,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CastVoteResponse:
    user_id = require_user_id(jwt_service, auth_token, "vote")

    try:
        request = CastVoteRequest(
            complaint_id=complaint_id,
            user_id=user_id,
            direction=direction,
        )
        return await cast_vote_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/complaints/{complaint_id}/upvote", response_model=CastVoteResponse)
async def upvote_complaint(
    complaint_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote a complaint, or remove an existing upvote.

    Requires authentication. Upvoting a complaint the user already
    upvoted removes the upvote; upvoting after a downvote switches it.

    Returns:
        Vote tallies and voter sets after the vote

    Raises:
        HTTPException: 401 if not authenticated, 404 if the complaint does
            not exist, 403 if it is not approved, 503 if the vote could not
            be applied
    """
    return await _cast_vote(
        complaint_id, VoteDirection.UP.value, cast_vote_use_case, jwt_service, auth_token
    )


@router.post("/complaints/{complaint_id}/downvote", response_model=CastVoteResponse)
async def downvote_complaint(
    complaint_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Downvote a complaint, or remove an existing downvote.

    Requires authentication. See upvote_complaint for toggle behaviour.
    """
    return await _cast_vote(
        complaint_id,
        VoteDirection.DOWN.value,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.post(
    "/complaints/{complaint_id}/vote/{direction}", response_model=CastVoteResponse
)
async def vote_on_complaint(
    complaint_id: str,
    direction: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a complaint with the direction in the path ("up" or "down").

    Raises:
        HTTPException: 400 for any other direction
    """
    return await _cast_vote(
        complaint_id, direction, cast_vote_use_case, jwt_service, auth_token
    )
