"""PostgreSQL repository implementations."""

from ombud.persistence.repository.complaint import PostgresComplaintRepository
from ombud.persistence.repository.petition import PostgresPetitionRepository

__all__ = [
    "PostgresComplaintRepository",
    "PostgresPetitionRepository",
]
