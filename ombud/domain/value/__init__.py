"""Domain value objects for Ombud."""

from ombud.domain.value.identifiers import ComplaintId, PetitionId, UserId
from ombud.domain.value.types import (
    ComplaintStatus,
    PetitionStatus,
    Role,
    VoteDirection,
    VoterSet,
)

__all__ = [
    # Identifiers
    "UserId",
    "ComplaintId",
    "PetitionId",
    # Types
    "ComplaintStatus",
    "PetitionStatus",
    "Role",
    "VoteDirection",
    "VoterSet",
]
