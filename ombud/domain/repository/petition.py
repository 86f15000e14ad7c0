"""Petition repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ombud.domain.model import Petition
from ombud.domain.value import PetitionId, PetitionStatus, UserId


class PetitionRepository(ABC):
    """Repository for Petition aggregate."""

    @abstractmethod
    async def find_by_id(self, petition_id: PetitionId) -> Optional[Petition]:
        """Find a petition by ID.

        Args:
            petition_id: The petition's unique identifier

        Returns:
            The petition if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, petition: Petition) -> Petition:
        """Insert a petition."""
        pass

    @abstractmethod
    async def add_signature(
        self, petition_id: PetitionId, user_id: UserId, now: datetime
    ) -> Optional[Petition]:
        """Atomically add a signer and increment the signature count.

        Matches only an approved petition, whose deadline (if any) is after
        ``now``, that the user has not signed yet.

        Args:
            petition_id: The petition's unique identifier
            user_id: The signing user
            now: Time the signature is recorded at

        Returns:
            The updated petition, or None if nothing matched

        Raises:
            StoreUnavailableError: If the store cannot be reached in time
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        petition_id: PetitionId,
        expected: PetitionStatus,
        status: PetitionStatus,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> Optional[Petition]:
        """Move a petition between statuses if it is still in ``expected``.

        The timestamp lands in approved_at, rejected_at or closed_at
        depending on ``status``.

        Returns:
            The updated petition, or None if nothing matched
        """
        pass
