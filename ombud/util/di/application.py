"""Application layer DI providers."""

from dishka import Scope, provide

from ombud.application.usecase.moderation import (
    ReviewComplaintUseCase,
    ReviewPetitionUseCase,
)
from ombud.application.usecase.petition import SignPetitionUseCase
from ombud.application.usecase.vote import CastVoteUseCase
from ombud.domain.service import ModerationService, PetitionService, VoteService
from ombud.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Petition use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_petition_use_case(
        self, petition_service: PetitionService
    ) -> SignPetitionUseCase:
        """Provide sign petition use case."""
        return SignPetitionUseCase(petition_service=petition_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_review_complaint_use_case(
        self, moderation_service: ModerationService
    ) -> ReviewComplaintUseCase:
        """Provide review complaint use case."""
        return ReviewComplaintUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_review_petition_use_case(
        self, moderation_service: ModerationService
    ) -> ReviewPetitionUseCase:
        """Provide review petition use case."""
        return ReviewPetitionUseCase(moderation_service=moderation_service)
