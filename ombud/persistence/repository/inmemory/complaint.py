"""In-memory complaint repository for testing."""

from datetime import datetime
from typing import Optional

from ombud.domain.model import Complaint, VoteMatch, VoteMutation
from ombud.domain.repository.complaint import ComplaintRepository
from ombud.domain.value import ComplaintId, ComplaintStatus


class InMemoryComplaintRepository(ComplaintRepository):
    """In-memory implementation of ComplaintRepository for testing.

    Conditional updates never await between checking the predicate and
    storing the result, so they are atomic with respect to other tasks
    on the event loop.
    """

    def __init__(self) -> None:
        self._complaints: dict[ComplaintId, Complaint] = {}

    async def find_by_id(self, complaint_id: ComplaintId) -> Optional[Complaint]:
        """Find a complaint by ID."""
        return self._complaints.get(complaint_id)

    async def save(self, complaint: Complaint) -> Complaint:
        """Save a complaint."""
        self._complaints[complaint.id] = complaint
        return complaint

    async def conditional_update(
        self, match: VoteMatch, mutation: VoteMutation
    ) -> Optional[Complaint]:
        """Apply a vote mutation if the stored complaint matches."""
        current = self._complaints.get(match.complaint_id)
        if current is None or not match.matches(current):
            return None
        updated = mutation.apply(current)
        self._complaints[updated.id] = updated
        return updated

    async def update_status(
        self,
        complaint_id: ComplaintId,
        expected: ComplaintStatus,
        status: ComplaintStatus,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> Optional[Complaint]:
        """Move a complaint between statuses if it is still in ``expected``."""
        current = self._complaints.get(complaint_id)
        if current is None or current.status != expected:
            return None
        updated = current.model_copy(
            update={
                "status": status,
                "reviewed_at": reviewed_at,
                "admin_notes": admin_notes,
            }
        )
        self._complaints[complaint_id] = updated
        return updated
