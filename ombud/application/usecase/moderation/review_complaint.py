"""Review complaint use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ombud.application.usecase.base import BaseUseCase, parse_uuid
from ombud.domain.service import ModerationService
from ombud.domain.value import ComplaintId, ComplaintStatus


class ReviewComplaintRequest(BaseModel):
    """Review complaint request."""

    complaint_id: str  # UUID string
    status: str  # "approved" or "rejected"
    admin_notes: Optional[str] = Field(default=None, max_length=2000)


class ReviewComplaintResponse(BaseModel):
    """Reviewed complaint."""

    id: str
    status: ComplaintStatus
    reviewed_at: Optional[datetime]
    admin_notes: Optional[str]


class ReviewComplaintUseCase(BaseUseCase):
    """Use case for approving or rejecting a pending complaint."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize review complaint use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ReviewComplaintRequest) -> ReviewComplaintResponse:
        """Execute review complaint flow."""
        complaint_id = ComplaintId(parse_uuid(request.complaint_id, "complaint ID"))

        complaint = await self.moderation_service.review_complaint(
            complaint_id, request.status, request.admin_notes
        )

        return ReviewComplaintResponse(
            id=str(complaint.id),
            status=complaint.status,
            reviewed_at=complaint.reviewed_at,
            admin_notes=complaint.admin_notes,
        )
