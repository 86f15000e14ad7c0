"""Petition aggregate root.

Petitions collect signatures from members once approved by an administrator.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ombud.domain.model.common import DomainModel, normalize_tags, utcnow
from ombud.domain.value import PetitionId, PetitionStatus, UserId


class Petition(DomainModel):
    """Petition aggregate root.

    Business rules:
    - Only approved petitions accept signatures
    - One signature per user; signature_count == len(signer_ids)
    - No signatures once the deadline (if any) has passed
    """

    id: PetitionId
    title: str = Field(min_length=1, max_length=150)
    description: str = Field(min_length=1)
    demands: str = Field(min_length=1)
    creator_id: UserId
    tags: tuple[str, ...] = ()
    status: PetitionStatus = PetitionStatus.PENDING
    goal: Optional[int] = Field(default=None, ge=1)
    deadline: Optional[datetime] = None
    signer_ids: tuple[UserId, ...] = ()
    signature_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    approved_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    admin_notes: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v: object) -> tuple[str, ...]:
        return normalize_tags(v)

    @model_validator(mode="after")
    def validate_signatures(self) -> "Petition":
        """Validate that the signature count agrees with the signers."""
        if len(set(self.signer_ids)) != len(self.signer_ids):
            raise ValueError("signer_ids contains duplicates")
        if self.signature_count != len(self.signer_ids):
            raise ValueError("signature_count does not match signer_ids")
        return self

    def is_open_for_signing(self, now: datetime) -> bool:
        """Whether a signature may be added at the given time."""
        if self.status != PetitionStatus.APPROVED:
            return False
        return self.deadline is None or self.deadline > now

    @property
    def goal_reached(self) -> bool:
        return self.goal is not None and self.signature_count >= self.goal


class SignatureResult(DomainModel):
    """Signature state of a petition after a signing."""

    signature_count: int
    signer_ids: list[UserId]
    goal: Optional[int] = None
    goal_reached: bool = False

    @classmethod
    def from_petition(cls, petition: Petition) -> "SignatureResult":
        return cls(
            signature_count=petition.signature_count,
            signer_ids=list(petition.signer_ids),
            goal=petition.goal,
            goal_reached=petition.goal_reached,
        )
