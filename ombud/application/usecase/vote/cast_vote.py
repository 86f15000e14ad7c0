"""Cast vote use case."""

from pydantic import BaseModel

from ombud.application.usecase.base import BaseUseCase, parse_uuid
from ombud.domain.service import VoteService
from ombud.domain.value import ComplaintId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    complaint_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    direction: str  # "up" or "down", validated by the domain


class CastVoteResponse(BaseModel):
    """Vote state after the transition."""

    upvote_count: int
    downvote_count: int
    score: int
    upvoter_ids: list[str]
    downvoter_ids: list[str]


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a complaint."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Vote tallies and voter sets, so clients can render their own
            vote state without another read

        Raises:
            ValidationError: If an ID is malformed or the direction is invalid
            NotFoundError: If the complaint does not exist
            ForbiddenError: If the complaint is not approved
            TransientError: If the vote could not be applied
        """
        complaint_id = ComplaintId(parse_uuid(request.complaint_id, "complaint ID"))
        user_id = UserId(parse_uuid(request.user_id, "user ID"))

        result = await self.vote_service.cast_vote(
            complaint_id, user_id, request.direction
        )

        return CastVoteResponse(
            upvote_count=result.upvote_count,
            downvote_count=result.downvote_count,
            score=result.score,
            upvoter_ids=[str(u) for u in result.upvoter_ids],
            downvoter_ids=[str(u) for u in result.downvoter_ids],
        )
