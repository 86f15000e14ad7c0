"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ombud.domain.repository import ComplaintRepository, PetitionRepository
from ombud.persistence.repository.inmemory import (
    InMemoryComplaintRepository,
    InMemoryPetitionRepository,
)
from ombud.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests served by one
    container. Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_complaint_repository(self) -> ComplaintRepository:
        """Provide in-memory complaint repository."""
        return InMemoryComplaintRepository()

    @provide(scope=Scope.APP)
    def get_petition_repository(self) -> PetitionRepository:
        """Provide in-memory petition repository."""
        return InMemoryPetitionRepository()
