"""Unit tests for ModerationService."""

import asyncio
from uuid import uuid4

import pytest

from ombud.config import VotingSettings
from ombud.domain.error import (
    InvalidTransitionError,
    NotFoundError,
    StoreUnavailableError,
    TransientError,
    ValidationError,
)
from ombud.domain.repository import ComplaintRepository, PetitionRepository
from ombud.domain.service import ModerationService, VoteService
from ombud.domain.value import ComplaintId, ComplaintStatus, PetitionId, PetitionStatus
from ombud.persistence.repository.inmemory import (
    InMemoryComplaintRepository,
    InMemoryPetitionRepository,
)
from tests.conftest import make_complaint, make_petition, new_user_id
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReviewComplaint:
    """Tests for review_complaint method."""

    @pytest.mark.asyncio
    async def test_approve_pending_complaint(self, unit_env):
        """Approving should set status, reviewed_at and notes."""
        moderation_service = await unit_env.get(ModerationService)
        complaint_repo = await unit_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )

        reviewed = await moderation_service.review_complaint(
            complaint.id, "approved", "  Verified with facilities  "
        )

        assert reviewed.status == ComplaintStatus.APPROVED
        assert reviewed.reviewed_at is not None
        assert reviewed.admin_notes == "Verified with facilities"

    @pytest.mark.asyncio
    async def test_approved_complaint_accepts_votes(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        vote_service = await unit_env.get(VoteService)
        complaint_repo = await unit_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )

        await moderation_service.review_complaint(complaint.id, ComplaintStatus.APPROVED)
        result = await vote_service.cast_vote(complaint.id, new_user_id(), "up")

        assert result.score == 1

    @pytest.mark.asyncio
    async def test_review_is_not_reversible(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        complaint_repo = await unit_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )
        await moderation_service.review_complaint(complaint.id, "rejected")

        with pytest.raises(InvalidTransitionError, match="from rejected to approved"):
            await moderation_service.review_complaint(complaint.id, "approved")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("decision", ["pending", "deleted"])
    async def test_invalid_decision(self, unit_env, decision):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(ValidationError):
            await moderation_service.review_complaint(
                ComplaintId(uuid4()), decision
            )

    @pytest.mark.asyncio
    async def test_missing_complaint(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await moderation_service.review_complaint(ComplaintId(uuid4()), "approved")


class TestReviewPetition:
    """Tests for review_petition method."""

    @pytest.mark.asyncio
    async def test_approve_then_close(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        petition_repo = await unit_env.get(PetitionRepository)
        petition = await petition_repo.save(
            make_petition(status=PetitionStatus.PENDING)
        )

        approved = await moderation_service.review_petition(petition.id, "approved")
        closed = await moderation_service.review_petition(petition.id, "closed")

        assert approved.status == PetitionStatus.APPROVED
        assert approved.approved_at is not None
        assert closed.status == PetitionStatus.CLOSED
        assert closed.closed_at is not None

    @pytest.mark.asyncio
    async def test_reject_pending(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        petition_repo = await unit_env.get(PetitionRepository)
        petition = await petition_repo.save(
            make_petition(status=PetitionStatus.PENDING)
        )

        rejected = await moderation_service.review_petition(
            petition.id, "rejected", "Duplicate of an open petition"
        )

        assert rejected.status == PetitionStatus.REJECTED
        assert rejected.rejected_at is not None
        assert rejected.admin_notes == "Duplicate of an open petition"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "current,decision",
        [
            (PetitionStatus.PENDING, "closed"),
            (PetitionStatus.APPROVED, "rejected"),
            (PetitionStatus.REJECTED, "approved"),
            (PetitionStatus.CLOSED, "approved"),
        ],
    )
    async def test_invalid_transition(self, unit_env, current, decision):
        moderation_service = await unit_env.get(ModerationService)
        petition_repo = await unit_env.get(PetitionRepository)
        petition = await petition_repo.save(make_petition(status=current))

        with pytest.raises(InvalidTransitionError):
            await moderation_service.review_petition(petition.id, decision)

    @pytest.mark.asyncio
    async def test_missing_petition(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await moderation_service.review_petition(PetitionId(uuid4()), "approved")

    @pytest.mark.asyncio
    async def test_unknown_decision(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(ValidationError):
            await moderation_service.review_petition(PetitionId(uuid4()), "archived")

    @pytest.mark.asyncio
    async def test_pending_decision_is_invalid(self, unit_env):
        """Moving a petition back to pending is a bad request, not a conflict."""
        moderation_service = await unit_env.get(ModerationService)
        petition_repo = await unit_env.get(PetitionRepository)
        petition = await petition_repo.save(make_petition())

        with pytest.raises(ValidationError):
            await moderation_service.review_petition(petition.id, "pending")

        stored = await petition_repo.find_by_id(petition.id)
        assert stored.status == PetitionStatus.APPROVED


class UnavailableComplaintRepository(InMemoryComplaintRepository):
    """Status updates fail with a store outage."""

    async def update_status(self, *args, **kwargs):
        raise StoreUnavailableError("connection reset")


class UnavailablePetitionRepository(InMemoryPetitionRepository):
    """Reads fail with a store outage."""

    async def find_by_id(self, petition_id):
        raise StoreUnavailableError("connection reset")


class TestModerationStoreFailures:
    """Tests for store outages during review."""

    @pytest.mark.asyncio
    async def test_complaint_review_outage_is_transient(self):
        complaint_repo = UnavailableComplaintRepository()
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )
        moderation_service = ModerationService(
            complaint_repo, InMemoryPetitionRepository(), VotingSettings()
        )

        with pytest.raises(TransientError) as exc_info:
            await moderation_service.review_complaint(complaint.id, "approved")

        assert isinstance(exc_info.value.__cause__, StoreUnavailableError)

    @pytest.mark.asyncio
    async def test_petition_review_outage_is_transient(self):
        moderation_service = ModerationService(
            InMemoryComplaintRepository(),
            UnavailablePetitionRepository(),
            VotingSettings(),
        )

        with pytest.raises(TransientError):
            await moderation_service.review_petition(PetitionId(uuid4()), "closed")

    @pytest.mark.asyncio
    async def test_slow_store_is_transient(self):
        """Review calls are bounded by the store timeout."""

        class SlowComplaintRepository(InMemoryComplaintRepository):
            async def update_status(self, *args, **kwargs):
                await asyncio.sleep(1)

        moderation_service = ModerationService(
            SlowComplaintRepository(),
            InMemoryPetitionRepository(),
            VotingSettings(store_timeout_seconds=0.01),
        )

        with pytest.raises(TransientError):
            await moderation_service.review_complaint(ComplaintId(uuid4()), "rejected")
