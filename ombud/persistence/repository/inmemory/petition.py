"""In-memory petition repository for testing."""

from datetime import datetime
from typing import Optional

from ombud.domain.model import Petition
from ombud.domain.repository.petition import PetitionRepository
from ombud.domain.value import PetitionId, PetitionStatus, UserId

_REVIEW_TIMESTAMP_FIELD = {
    PetitionStatus.APPROVED: "approved_at",
    PetitionStatus.REJECTED: "rejected_at",
    PetitionStatus.CLOSED: "closed_at",
}


class InMemoryPetitionRepository(PetitionRepository):
    """In-memory implementation of PetitionRepository for testing."""

    def __init__(self) -> None:
        self._petitions: dict[PetitionId, Petition] = {}

    async def find_by_id(self, petition_id: PetitionId) -> Optional[Petition]:
        """Find a petition by ID."""
        return self._petitions.get(petition_id)

    async def save(self, petition: Petition) -> Petition:
        """Save a petition."""
        self._petitions[petition.id] = petition
        return petition

    async def add_signature(
        self, petition_id: PetitionId, user_id: UserId, now: datetime
    ) -> Optional[Petition]:
        """Add a signer if the petition is open and not yet signed by the user."""
        current = self._petitions.get(petition_id)
        if current is None or not current.is_open_for_signing(now):
            return None
        if user_id in current.signer_ids:
            return None
        updated = Petition.model_validate(
            {
                **current.model_dump(),
                "signer_ids": (*current.signer_ids, user_id),
                "signature_count": current.signature_count + 1,
            }
        )
        self._petitions[petition_id] = updated
        return updated

    async def update_status(
        self,
        petition_id: PetitionId,
        expected: PetitionStatus,
        status: PetitionStatus,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> Optional[Petition]:
        """Move a petition between statuses if it is still in ``expected``."""
        current = self._petitions.get(petition_id)
        if current is None or current.status != expected:
            return None
        changes = {"status": status, "admin_notes": admin_notes}
        timestamp_field = _REVIEW_TIMESTAMP_FIELD.get(status)
        if timestamp_field:
            changes[timestamp_field] = reviewed_at
        updated = current.model_copy(update=changes)
        self._petitions[petition_id] = updated
        return updated
