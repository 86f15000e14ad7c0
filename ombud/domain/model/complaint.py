"""Complaint aggregate root.

Complaints are anonymous, moderated posts that approved members vote on.
The author is deliberately not part of the model.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ombud.domain.model.common import DomainModel, normalize_tags, utcnow
from ombud.domain.value import ComplaintId, ComplaintStatus, UserId, VoterSet


class Complaint(DomainModel):
    """Complaint aggregate root (the votable item).

    Invariants, checked on every construction:
    - a user is in at most one of upvoter_ids / downvoter_ids
    - upvote_count == len(upvoter_ids), downvote_count == len(downvoter_ids)
    - score == upvote_count - downvote_count
    """

    id: ComplaintId
    text: str = Field(min_length=1)
    tags: tuple[str, ...] = ()
    status: ComplaintStatus = ComplaintStatus.PENDING
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    score: int = 0
    upvoter_ids: tuple[UserId, ...] = ()
    downvoter_ids: tuple[UserId, ...] = ()
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    reviewed_at: Optional[datetime] = None
    admin_notes: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v: object) -> tuple[str, ...]:
        return normalize_tags(v)

    @model_validator(mode="after")
    def validate_vote_state(self) -> "Complaint":
        """Validate that tallies agree with the voter sets."""
        upvoters = set(self.upvoter_ids)
        downvoters = set(self.downvoter_ids)
        if len(upvoters) != len(self.upvoter_ids):
            raise ValueError("upvoter_ids contains duplicates")
        if len(downvoters) != len(self.downvoter_ids):
            raise ValueError("downvoter_ids contains duplicates")
        if upvoters & downvoters:
            raise ValueError("A user cannot both upvote and downvote a complaint")
        if self.upvote_count != len(upvoters):
            raise ValueError("upvote_count does not match upvoter_ids")
        if self.downvote_count != len(downvoters):
            raise ValueError("downvote_count does not match downvoter_ids")
        if self.score != self.upvote_count - self.downvote_count:
            raise ValueError("score must equal upvote_count - downvote_count")
        return self

    @property
    def is_votable(self) -> bool:
        return self.status == ComplaintStatus.APPROVED

    def voters(self, voter_set: VoterSet) -> tuple[UserId, ...]:
        """Members of the given voter set."""
        return getattr(self, voter_set.value)

    def is_member(self, voter_set: VoterSet, user_id: UserId) -> bool:
        return user_id in self.voters(voter_set)
