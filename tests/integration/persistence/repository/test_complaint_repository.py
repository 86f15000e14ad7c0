"""Integration tests for PostgresComplaintRepository.

These tests run the conditional vote updates against a migrated PostgreSQL
database (``python scripts/run_migrations.py``). Run with ``pytest -m integration``.
"""

import pytest

from ombud.domain.model import PriorVote, plan_vote
from ombud.domain.repository import ComplaintRepository
from ombud.domain.service import VoteService
from ombud.domain.value import ComplaintStatus, VoteDirection
from tests.conftest import make_complaint, new_user_id
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestComplaintRepositoryIntegration:
    """Integration tests for the conditional update statements."""

    @pytest.mark.asyncio
    async def test_round_trip(self, integration_env):
        complaint_repo = await integration_env.get(ComplaintRepository)
        u1, u2 = new_user_id(), new_user_id()
        complaint = make_complaint(upvoters=[u1], downvoters=[u2])

        await complaint_repo.save(complaint)
        stored = await complaint_repo.find_by_id(complaint.id)

        assert stored.upvoter_ids == (u1,)
        assert stored.downvoter_ids == (u2,)
        assert stored.tags == complaint.tags
        assert stored.score == 0

    @pytest.mark.asyncio
    async def test_conditional_update_applies_switch(self, integration_env):
        """Switching sides should move the user and swing the score by two."""
        complaint_repo = await integration_env.get(ComplaintRepository)
        u1, u2 = new_user_id(), new_user_id()
        complaint = await complaint_repo.save(make_complaint(upvoters=[u2, u1]))

        match, mutation = plan_vote(
            complaint.id, u1, VoteDirection.DOWN, PriorVote.OPPOSITE
        )
        updated = await complaint_repo.conditional_update(match, mutation)

        assert updated.upvoter_ids == (u2,)
        assert updated.downvoter_ids == (u1,)
        assert updated.upvote_count == 1
        assert updated.downvote_count == 1
        assert updated.score == 0

    @pytest.mark.asyncio
    async def test_stale_predicate_matches_nothing(self, integration_env):
        """A plan made from stale state should leave the row unchanged."""
        complaint_repo = await integration_env.get(ComplaintRepository)
        u1 = new_user_id()
        complaint = await complaint_repo.save(make_complaint(upvoters=[u1]))

        match, mutation = plan_vote(complaint.id, u1, VoteDirection.UP, PriorVote.NONE)
        result = await complaint_repo.conditional_update(match, mutation)

        assert result is None
        stored = await complaint_repo.find_by_id(complaint.id)
        assert stored.upvoter_ids == (u1,)
        assert stored.upvote_count == 1

    @pytest.mark.asyncio
    async def test_pending_complaint_never_matches(self, integration_env):
        complaint_repo = await integration_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )

        match, mutation = plan_vote(
            complaint.id, new_user_id(), VoteDirection.UP, PriorVote.NONE
        )

        assert await complaint_repo.conditional_update(match, mutation) is None

    @pytest.mark.asyncio
    async def test_vote_service_toggle(self, integration_env):
        vote_service = await integration_env.get(VoteService)
        complaint_repo = await integration_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(make_complaint())
        u1 = new_user_id()

        first = await vote_service.cast_vote(complaint.id, u1, "down")
        second = await vote_service.cast_vote(complaint.id, u1, "down")

        assert first.score == -1
        assert second.score == 0
        assert second.downvoter_ids == []

    @pytest.mark.asyncio
    async def test_update_status_only_from_expected(self, integration_env):
        complaint_repo = await integration_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )

        approved = await complaint_repo.update_status(
            complaint.id,
            expected=ComplaintStatus.PENDING,
            status=ComplaintStatus.APPROVED,
            reviewed_at=complaint.created_at,
        )
        again = await complaint_repo.update_status(
            complaint.id,
            expected=ComplaintStatus.PENDING,
            status=ComplaintStatus.REJECTED,
            reviewed_at=complaint.created_at,
        )

        assert approved.status == ComplaintStatus.APPROVED
        assert again is None
