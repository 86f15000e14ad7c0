"""PostgreSQL implementation of Complaint repository."""

from datetime import datetime
from typing import Any, Optional

import logfire
from sqlalchemy import and_, any_, func, insert, literal, not_, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from ombud.domain.model import Complaint, VoteMatch, VoteMutation
from ombud.domain.repository import ComplaintRepository
from ombud.domain.value import ComplaintId, ComplaintStatus, UserId, VoterSet
from ombud.persistence.database import store_errors
from ombud.persistence.mappers import complaint_to_dict, row_to_complaint
from ombud.persistence.tables import complaints_table


def _is_member(voter_set: VoterSet, user_id: UserId):
    """SQL predicate: ``user_id = ANY(<voter set column>)``."""
    return literal(user_id, UUID) == any_(complaints_table.c[voter_set.value])


class PostgresComplaintRepository(ComplaintRepository):
    """PostgreSQL implementation of ComplaintRepository.

    Conditional updates are single ``UPDATE ... WHERE ... RETURNING``
    statements; PostgreSQL row locking serializes concurrent voters and
    re-evaluates the predicate against the latest row version.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, complaint_id: ComplaintId) -> Optional[Complaint]:
        """Find a complaint by ID."""
        stmt = select(complaints_table).where(complaints_table.c.id == complaint_id)
        with store_errors():
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_complaint(row._asdict()) if row else None

    async def save(self, complaint: Complaint) -> Complaint:
        """Insert a complaint."""
        stmt = insert(complaints_table).values(**complaint_to_dict(complaint))
        with store_errors():
            await self.session.execute(stmt)
            await self.session.flush()
        return complaint

    async def conditional_update(
        self, match: VoteMatch, mutation: VoteMutation
    ) -> Optional[Complaint]:
        """Apply a vote mutation in one statement if the predicate holds."""
        conditions = [
            complaints_table.c.id == match.complaint_id,
            complaints_table.c.status == match.status.value,
        ]
        conditions += [_is_member(s, match.user_id) for s in match.present_in]
        conditions += [not_(_is_member(s, match.user_id)) for s in match.absent_from]

        stmt = (
            update(complaints_table)
            .where(and_(*conditions))
            .values(**self._mutation_values(mutation))
            .returning(complaints_table)
        )

        with logfire.span(
            "complaint_repository.conditional_update",
            complaint_id=str(match.complaint_id),
        ):
            with store_errors():
                result = await self.session.execute(stmt)
                await self.session.flush()
            row = result.fetchone()
            if not row:
                logfire.info(
                    "Conditional update matched nothing",
                    complaint_id=str(match.complaint_id),
                )
                return None
            return row_to_complaint(row._asdict())

    async def update_status(
        self,
        complaint_id: ComplaintId,
        expected: ComplaintStatus,
        status: ComplaintStatus,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> Optional[Complaint]:
        """Move a complaint between statuses if it is still in ``expected``."""
        stmt = (
            update(complaints_table)
            .where(complaints_table.c.id == complaint_id)
            .where(complaints_table.c.status == expected.value)
            .values(
                status=status.value,
                reviewed_at=reviewed_at,
                admin_notes=admin_notes,
            )
            .returning(complaints_table)
        )
        with store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
        row = result.fetchone()
        return row_to_complaint(row._asdict()) if row else None

    @staticmethod
    def _mutation_values(mutation: VoteMutation) -> dict[str, Any]:
        """Column assignments for a vote mutation, relative to the current row."""
        user_id = literal(mutation.user_id, UUID)
        values: dict[str, Any] = {
            "score": complaints_table.c.score + mutation.score_delta
        }
        for voter_set in VoterSet:
            if voter_set not in (mutation.add_to, mutation.remove_from):
                continue
            column = complaints_table.c[voter_set.value]
            voters = column
            if mutation.remove_from == voter_set:
                voters = func.array_remove(voters, user_id, type_=column.type)
            if mutation.add_to == voter_set:
                voters = func.array_append(voters, user_id, type_=column.type)
            values[voter_set.value] = voters
            count_column = complaints_table.c[voter_set.count_field]
            values[voter_set.count_field] = count_column + mutation.count_delta(
                voter_set
            )
        return values
