"""Complaint repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ombud.domain.model import Complaint, VoteMatch, VoteMutation
from ombud.domain.value import ComplaintId, ComplaintStatus


class ComplaintRepository(ABC):
    """Repository for Complaint aggregate.

    Defines the contract for complaint persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, complaint_id: ComplaintId) -> Optional[Complaint]:
        """Find a complaint by ID.

        Args:
            complaint_id: The complaint's unique identifier

        Returns:
            The complaint if found, None otherwise

        Raises:
            StoreUnavailableError: If the store cannot be reached in time
        """
        pass

    @abstractmethod
    async def save(self, complaint: Complaint) -> Complaint:
        """Insert a complaint.

        Args:
            complaint: The complaint to save

        Returns:
            The saved complaint
        """
        pass

    @abstractmethod
    async def conditional_update(
        self, match: VoteMatch, mutation: VoteMutation
    ) -> Optional[Complaint]:
        """Apply a vote mutation if, and only if, the complaint matches.

        Matching and mutating happen as one atomic step in the store: a
        concurrent writer can never observe or overwrite a half-applied vote.

        Args:
            match: Predicate the complaint must satisfy at write time
            mutation: Membership and tally change to apply

        Returns:
            The complaint after the update, or None if nothing matched

        Raises:
            StoreUnavailableError: If the store cannot be reached in time
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        complaint_id: ComplaintId,
        expected: ComplaintStatus,
        status: ComplaintStatus,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> Optional[Complaint]:
        """Move a complaint between statuses if it is still in ``expected``.

        Args:
            complaint_id: The complaint's unique identifier
            expected: Status the complaint must currently have
            status: New status
            reviewed_at: Review timestamp
            admin_notes: Optional moderator notes

        Returns:
            The updated complaint, or None if nothing matched
        """
        pass
