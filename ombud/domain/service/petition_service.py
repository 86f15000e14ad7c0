"""Petition domain service."""

import logfire

from ombud.config import VotingSettings
from ombud.domain.error import (
    AlreadySignedError,
    ForbiddenError,
    NotFoundError,
    TransientError,
)
from ombud.domain.model import SignatureResult
from ombud.domain.model.common import utcnow
from ombud.domain.repository import PetitionRepository
from ombud.domain.value import PetitionId, PetitionStatus, UserId

from .base import Service


class PetitionService(Service):
    """Domain service for petition signatures.

    Signing is the one-directional form of a complaint vote: a conditional
    update adds the signer only if they have not signed yet.
    """

    store_name = "Petition store"

    def __init__(
        self,
        petition_repository: PetitionRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize petition service.

        Args:
            petition_repository: Petition repository
            voting_settings: Retry and timeout limits
        """
        self.petition_repository = petition_repository
        self.voting_settings = voting_settings
        self.store_timeout_seconds = voting_settings.store_timeout_seconds

    async def sign_petition(
        self, petition_id: PetitionId, user_id: UserId
    ) -> SignatureResult:
        """Sign a petition.

        Args:
            petition_id: Petition ID
            user_id: Authenticated user ID

        Returns:
            Signature count and signers after signing

        Raises:
            NotFoundError: If the petition does not exist
            ForbiddenError: If the petition is not approved or its deadline passed
            AlreadySignedError: If the user already signed
            TransientError: If the store timed out or the write kept failing
        """
        with logfire.span(
            "petition_service.sign_petition",
            petition_id=str(petition_id),
            user_id=str(user_id),
        ):
            for attempt in range(1, self.voting_settings.max_attempts + 1):
                now = utcnow()
                updated = await self._call_store(
                    self.petition_repository.add_signature(petition_id, user_id, now)
                )
                if updated is not None:
                    logfire.info(
                        "Petition signed",
                        petition_id=str(petition_id),
                        signature_count=updated.signature_count,
                    )
                    return SignatureResult.from_petition(updated)

                # Work out why the signature was refused
                petition = await self._call_store(
                    self.petition_repository.find_by_id(petition_id)
                )
                if petition is None:
                    raise NotFoundError("Petition", str(petition_id))
                if petition.status != PetitionStatus.APPROVED:
                    raise ForbiddenError("Petition is not currently open for signing")
                if not petition.is_open_for_signing(now):
                    raise ForbiddenError("The deadline for signing this petition has passed")
                if user_id in petition.signer_ids:
                    logfire.warn(
                        "Duplicate signature attempt",
                        petition_id=str(petition_id),
                        user_id=str(user_id),
                    )
                    raise AlreadySignedError(str(petition_id), str(user_id))

                logfire.warn(
                    "Signature predicate did not match, retrying",
                    petition_id=str(petition_id),
                    attempt=attempt,
                )

            raise TransientError(
                f"Signature on petition {petition_id} could not be applied, please retry"
            )
