"""Review petition use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ombud.application.usecase.base import BaseUseCase, parse_uuid
from ombud.domain.service import ModerationService
from ombud.domain.value import PetitionId, PetitionStatus


class ReviewPetitionRequest(BaseModel):
    """Review petition request."""

    petition_id: str  # UUID string
    status: str  # "approved", "rejected" or "closed"
    admin_notes: Optional[str] = Field(default=None, max_length=2000)


class ReviewPetitionResponse(BaseModel):
    """Reviewed petition."""

    id: str
    status: PetitionStatus
    signature_count: int
    approved_at: Optional[datetime]
    rejected_at: Optional[datetime]
    closed_at: Optional[datetime]
    admin_notes: Optional[str]


class ReviewPetitionUseCase(BaseUseCase):
    """Use case for approving, rejecting or closing a petition."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize review petition use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ReviewPetitionRequest) -> ReviewPetitionResponse:
        """Execute review petition flow."""
        petition_id = PetitionId(parse_uuid(request.petition_id, "petition ID"))

        petition = await self.moderation_service.review_petition(
            petition_id, request.status, request.admin_notes
        )

        return ReviewPetitionResponse(
            id=str(petition.id),
            status=petition.status,
            signature_count=petition.signature_count,
            approved_at=petition.approved_at,
            rejected_at=petition.rejected_at,
            closed_at=petition.closed_at,
            admin_notes=petition.admin_notes,
        )
