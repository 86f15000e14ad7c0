"""Vote domain service."""

import logfire

from ombud.config import VotingSettings
from ombud.domain.error import (
    ForbiddenError,
    NotFoundError,
    TransientError,
)
from ombud.domain.model import Complaint, PriorVote, VoteResult, plan_vote
from ombud.domain.repository import ComplaintRepository
from ombud.domain.value import ComplaintId, UserId, VoteDirection

from .base import Service


class VoteService(Service):
    """Domain service for complaint votes.

    Every vote is a toggle keyed on the user's current relationship to the
    complaint:

    - no vote: add the vote (score +/-1)
    - same direction: remove it (score -/+1)
    - opposite direction: switch sides (score +/-2)

    The transition is written with a single conditional update whose
    predicate re-checks the relationship it was planned from. When the
    predicate no longer holds, the complaint is re-read and the transition
    re-planned, up to ``max_attempts`` times.
    """

    store_name = "Vote store"

    def __init__(
        self,
        complaint_repository: ComplaintRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            complaint_repository: Complaint repository
            voting_settings: Retry and timeout limits
        """
        self.complaint_repository = complaint_repository
        self.voting_settings = voting_settings
        self.store_timeout_seconds = voting_settings.store_timeout_seconds

    async def cast_vote(
        self,
        complaint_id: ComplaintId,
        user_id: UserId,
        direction: VoteDirection | str,
    ) -> VoteResult:
        """Cast, remove or switch a user's vote on a complaint.

        Args:
            complaint_id: Complaint ID
            user_id: Authenticated user ID
            direction: Requested direction ("up" or "down")

        Returns:
            Vote tallies and voter sets after the transition

        Raises:
            InvalidDirectionError: If direction is not up or down
            NotFoundError: If the complaint does not exist
            ForbiddenError: If the complaint is not approved
            TransientError: If the write kept losing races or the store timed out
        """
        direction = VoteDirection.parse(direction)

        with logfire.span(
            "vote_service.cast_vote",
            complaint_id=str(complaint_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            max_attempts = self.voting_settings.max_attempts
            for attempt in range(1, max_attempts + 1):
                complaint = await self._get_votable_complaint(complaint_id)

                prior = PriorVote.of(complaint, user_id, direction)
                match, mutation = plan_vote(complaint_id, user_id, direction, prior)

                updated = await self._call_store(
                    self.complaint_repository.conditional_update(match, mutation)
                )
                if updated is not None:
                    logfire.info(
                        "Vote applied",
                        complaint_id=str(complaint_id),
                        prior=prior.value,
                        attempt=attempt,
                        score=updated.score,
                    )
                    return VoteResult.from_complaint(updated)

                logfire.warn(
                    "Vote predicate did not match, re-reading complaint",
                    complaint_id=str(complaint_id),
                    user_id=str(user_id),
                    prior=prior.value,
                    attempt=attempt,
                )

            logfire.error(
                "Vote not applied after retries",
                complaint_id=str(complaint_id),
                user_id=str(user_id),
                attempts=max_attempts,
            )
            raise TransientError(
                f"Vote on complaint {complaint_id} could not be applied, please retry"
            )

    async def _get_votable_complaint(self, complaint_id: ComplaintId) -> Complaint:
        """Load a complaint and check that it accepts votes."""
        complaint = await self._call_store(
            self.complaint_repository.find_by_id(complaint_id)
        )
        if complaint is None:
            logfire.warn("Vote on non-existent complaint", complaint_id=str(complaint_id))
            raise NotFoundError("Complaint", str(complaint_id))
        if not complaint.is_votable:
            logfire.warn(
                "Vote on unapproved complaint",
                complaint_id=str(complaint_id),
                status=complaint.status.value,
            )
            raise ForbiddenError("Voting is only allowed on approved complaints")
        return complaint
