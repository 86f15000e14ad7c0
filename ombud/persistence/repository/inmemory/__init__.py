"""In-memory repository implementations for testing."""

from .complaint import InMemoryComplaintRepository
from .petition import InMemoryPetitionRepository

__all__ = [
    "InMemoryComplaintRepository",
    "InMemoryPetitionRepository",
]
