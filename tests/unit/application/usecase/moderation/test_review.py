"""Unit tests for the moderation use cases."""

import pytest

from ombud.application.usecase.moderation import (
    ReviewComplaintRequest,
    ReviewComplaintUseCase,
    ReviewPetitionRequest,
    ReviewPetitionUseCase,
)
from ombud.domain.repository import ComplaintRepository, PetitionRepository
from ombud.domain.value import ComplaintStatus, PetitionStatus
from tests.conftest import make_complaint, make_petition
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReviewComplaintUseCase:
    """Tests for ReviewComplaintUseCase."""

    @pytest.mark.asyncio
    async def test_reject_complaint(self, unit_env):
        review_use_case = await unit_env.get(ReviewComplaintUseCase)
        complaint_repo = await unit_env.get(ComplaintRepository)
        complaint = await complaint_repo.save(
            make_complaint(status=ComplaintStatus.PENDING)
        )

        response = await review_use_case.execute(
            ReviewComplaintRequest(
                complaint_id=str(complaint.id),
                status="rejected",
                admin_notes="Contains personal information",
            )
        )

        assert response.id == str(complaint.id)
        assert response.status == ComplaintStatus.REJECTED
        assert response.reviewed_at is not None
        assert response.admin_notes == "Contains personal information"


class TestReviewPetitionUseCase:
    """Tests for ReviewPetitionUseCase."""

    @pytest.mark.asyncio
    async def test_close_petition_keeps_signatures(self, unit_env):
        review_use_case = await unit_env.get(ReviewPetitionUseCase)
        petition_repo = await unit_env.get(PetitionRepository)
        petition = await petition_repo.save(make_petition())

        response = await review_use_case.execute(
            ReviewPetitionRequest(petition_id=str(petition.id), status="closed")
        )

        assert response.status == PetitionStatus.CLOSED
        assert response.closed_at is not None
        assert response.signature_count == 0
