"""Moderation domain service."""

from typing import Optional

import logfire

from ombud.config import VotingSettings
from ombud.domain.error import InvalidTransitionError, NotFoundError, ValidationError
from ombud.domain.model import Complaint, Petition
from ombud.domain.model.common import utcnow
from ombud.domain.repository import ComplaintRepository, PetitionRepository
from ombud.domain.value import ComplaintId, ComplaintStatus, PetitionId, PetitionStatus

from .base import Service

# Decisions an administrator can take from each petition status
PETITION_TRANSITIONS: dict[PetitionStatus, frozenset[PetitionStatus]] = {
    PetitionStatus.PENDING: frozenset({PetitionStatus.APPROVED, PetitionStatus.REJECTED}),
    PetitionStatus.APPROVED: frozenset({PetitionStatus.CLOSED}),
}


class ModerationService(Service):
    """Domain service for administrator review of complaints and petitions.

    Status changes use the repositories' conditional updates, so a review
    only lands if the item is still in the status it was reviewed from.
    """

    store_name = "Moderation store"

    def __init__(
        self,
        complaint_repository: ComplaintRepository,
        petition_repository: PetitionRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            complaint_repository: Complaint repository
            petition_repository: Petition repository
            voting_settings: Store timeout limit
        """
        self.complaint_repository = complaint_repository
        self.petition_repository = petition_repository
        self.store_timeout_seconds = voting_settings.store_timeout_seconds

    async def review_complaint(
        self,
        complaint_id: ComplaintId,
        decision: ComplaintStatus | str,
        admin_notes: Optional[str] = None,
    ) -> Complaint:
        """Approve or reject a pending complaint.

        Args:
            complaint_id: Complaint ID
            decision: "approved" or "rejected"
            admin_notes: Optional notes from the reviewer

        Returns:
            The reviewed complaint

        Raises:
            ValidationError: If decision is not approved or rejected
            NotFoundError: If the complaint does not exist
            InvalidTransitionError: If the complaint was already reviewed
            TransientError: If the store timed out or dropped the connection
        """
        try:
            status = ComplaintStatus(decision)
        except ValueError:
            raise ValidationError(f"Invalid complaint decision: {decision!r}")
        if status == ComplaintStatus.PENDING:
            raise ValidationError("Decision must be 'approved' or 'rejected'")

        with logfire.span(
            "moderation_service.review_complaint",
            complaint_id=str(complaint_id),
            decision=status.value,
        ):
            updated = await self._call_store(
                self.complaint_repository.update_status(
                    complaint_id,
                    expected=ComplaintStatus.PENDING,
                    status=status,
                    reviewed_at=utcnow(),
                    admin_notes=_clean_notes(admin_notes),
                )
            )
            if updated is not None:
                logfire.info(
                    "Complaint reviewed",
                    complaint_id=str(complaint_id),
                    status=status.value,
                )
                return updated

            current = await self._call_store(
                self.complaint_repository.find_by_id(complaint_id)
            )
            if current is None:
                raise NotFoundError("Complaint", str(complaint_id))
            raise InvalidTransitionError(
                "complaint", current.status.value, status.value
            )

    async def review_petition(
        self,
        petition_id: PetitionId,
        decision: PetitionStatus | str,
        admin_notes: Optional[str] = None,
    ) -> Petition:
        """Approve, reject or close a petition.

        Pending petitions can be approved or rejected; approved petitions
        can be closed.

        Raises:
            ValidationError: If decision is not approved, rejected or closed
            NotFoundError: If the petition does not exist
            InvalidTransitionError: If the decision does not apply to the current status
            TransientError: If the store timed out or dropped the connection
        """
        try:
            status = PetitionStatus(decision)
        except ValueError:
            raise ValidationError(f"Invalid petition decision: {decision!r}")
        if status == PetitionStatus.PENDING:
            raise ValidationError("Decision must be 'approved', 'rejected' or 'closed'")

        with logfire.span(
            "moderation_service.review_petition",
            petition_id=str(petition_id),
            decision=status.value,
        ):
            petition = await self._call_store(
                self.petition_repository.find_by_id(petition_id)
            )
            if petition is None:
                raise NotFoundError("Petition", str(petition_id))
            if status not in PETITION_TRANSITIONS.get(petition.status, frozenset()):
                raise InvalidTransitionError(
                    "petition", petition.status.value, status.value
                )

            updated = await self._call_store(
                self.petition_repository.update_status(
                    petition_id,
                    expected=petition.status,
                    status=status,
                    reviewed_at=utcnow(),
                    admin_notes=_clean_notes(admin_notes),
                )
            )
            if updated is None:
                # Another reviewer got there first
                current = await self._call_store(
                    self.petition_repository.find_by_id(petition_id)
                )
                if current is None:
                    raise NotFoundError("Petition", str(petition_id))
                raise InvalidTransitionError(
                    "petition", current.status.value, status.value
                )

            logfire.info(
                "Petition reviewed", petition_id=str(petition_id), status=status.value
            )
            return updated


def _clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    return notes.strip() or None
