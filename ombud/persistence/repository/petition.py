"""PostgreSQL implementation of Petition repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import any_, func, insert, literal, not_, or_, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from ombud.domain.model import Petition
from ombud.domain.repository import PetitionRepository
from ombud.domain.value import PetitionId, PetitionStatus, UserId
from ombud.persistence.database import store_errors
from ombud.persistence.mappers import petition_to_dict, row_to_petition
from ombud.persistence.tables import petitions_table

# Column receiving the review timestamp for each decision
_REVIEW_TIMESTAMP_COLUMN = {
    PetitionStatus.APPROVED: "approved_at",
    PetitionStatus.REJECTED: "rejected_at",
    PetitionStatus.CLOSED: "closed_at",
}


class PostgresPetitionRepository(PetitionRepository):
    """PostgreSQL implementation of PetitionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, petition_id: PetitionId) -> Optional[Petition]:
        """Find a petition by ID."""
        stmt = select(petitions_table).where(petitions_table.c.id == petition_id)
        with store_errors():
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_petition(row._asdict()) if row else None

    async def save(self, petition: Petition) -> Petition:
        """Insert a petition."""
        stmt = insert(petitions_table).values(**petition_to_dict(petition))
        with store_errors():
            await self.session.execute(stmt)
            await self.session.flush()
        return petition

    async def add_signature(
        self, petition_id: PetitionId, user_id: UserId, now: datetime
    ) -> Optional[Petition]:
        """Atomically add a signer and increment the signature count."""
        signer = literal(user_id, UUID)
        signers = petitions_table.c.signer_ids
        stmt = (
            update(petitions_table)
            .where(petitions_table.c.id == petition_id)
            .where(petitions_table.c.status == PetitionStatus.APPROVED.value)
            .where(
                or_(
                    petitions_table.c.deadline.is_(None),
                    petitions_table.c.deadline > now,
                )
            )
            .where(not_(signer == any_(signers)))
            .values(
                signer_ids=func.array_append(signers, signer, type_=signers.type),
                signature_count=petitions_table.c.signature_count + 1,
            )
            .returning(petitions_table)
        )
        with store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
        row = result.fetchone()
        return row_to_petition(row._asdict()) if row else None

    async def update_status(
        self,
        petition_id: PetitionId,
        expected: PetitionStatus,
        status: PetitionStatus,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> Optional[Petition]:
        """Move a petition between statuses if it is still in ``expected``."""
        values = {"status": status.value, "admin_notes": admin_notes}
        timestamp_column = _REVIEW_TIMESTAMP_COLUMN.get(status)
        if timestamp_column:
            values[timestamp_column] = reviewed_at

        stmt = (
            update(petitions_table)
            .where(petitions_table.c.id == petition_id)
            .where(petitions_table.c.status == expected.value)
            .values(**values)
            .returning(petitions_table)
        )
        with store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
        row = result.fetchone()
        return row_to_petition(row._asdict()) if row else None
