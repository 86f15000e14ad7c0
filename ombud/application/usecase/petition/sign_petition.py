"""Sign petition use case."""

from typing import Optional

from pydantic import BaseModel

from ombud.application.usecase.base import BaseUseCase, parse_uuid
from ombud.domain.service import PetitionService
from ombud.domain.value import PetitionId, UserId


class SignPetitionRequest(BaseModel):
    """Sign petition request."""

    petition_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class SignPetitionResponse(BaseModel):
    """Sign petition response."""

    message: str
    signature_count: int
    signer_ids: list[str]
    goal: Optional[int] = None
    goal_reached: bool = False


class SignPetitionUseCase(BaseUseCase):
    """Use case for signing a petition."""

    def __init__(self, petition_service: PetitionService) -> None:
        """Initialize sign petition use case.

        Args:
            petition_service: Petition domain service
        """
        self.petition_service = petition_service

    async def execute(self, request: SignPetitionRequest) -> SignPetitionResponse:
        """Execute sign petition flow.

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the petition does not exist
            ForbiddenError: If the petition is not open for signing
            AlreadySignedError: If the user already signed
        """
        petition_id = PetitionId(parse_uuid(request.petition_id, "petition ID"))
        user_id = UserId(parse_uuid(request.user_id, "user ID"))

        result = await self.petition_service.sign_petition(petition_id, user_id)

        return SignPetitionResponse(
            message="Petition signed successfully",
            signature_count=result.signature_count,
            signer_ids=[str(u) for u in result.signer_ids],
            goal=result.goal,
            goal_reached=result.goal_reached,
        )
