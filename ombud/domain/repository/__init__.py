"""Repository interfaces for Ombud domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from ombud.domain.repository.complaint import ComplaintRepository
from ombud.domain.repository.petition import PetitionRepository

__all__ = [
    "ComplaintRepository",
    "PetitionRepository",
]
