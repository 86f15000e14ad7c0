"""Domain layer DI providers."""

from dishka import Scope, provide

from ombud.config import AuthSettings, VotingSettings
from ombud.domain.repository import ComplaintRepository, PetitionRepository
from ombud.domain.service import (
    JWTService,
    ModerationService,
    PetitionService,
    VoteService,
)
from ombud.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_service(
        self,
        complaint_repository: ComplaintRepository,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            complaint_repository=complaint_repository,
            voting_settings=voting_settings,
        )

    @provide
    def get_petition_service(
        self,
        petition_repository: PetitionRepository,
        voting_settings: VotingSettings,
    ) -> PetitionService:
        """Provide petition domain service."""
        return PetitionService(
            petition_repository=petition_repository,
            voting_settings=voting_settings,
        )

    @provide
    def get_moderation_service(
        self,
        complaint_repository: ComplaintRepository,
        petition_repository: PetitionRepository,
        voting_settings: VotingSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            complaint_repository=complaint_repository,
            petition_repository=petition_repository,
            voting_settings=voting_settings,
        )
