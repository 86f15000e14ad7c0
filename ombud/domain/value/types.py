"""Domain value types for Ombud.

Enums shared by the models, services and persistence mappings.
"""

from enum import Enum

from ombud.domain.error import InvalidDirectionError


class VoteDirection(str, Enum):
    """Direction of a vote on a complaint."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, raw: "str | VoteDirection") -> "VoteDirection":
        """Parse a raw direction, raising InvalidDirectionError if unknown."""
        try:
            return cls(raw)
        except ValueError:
            raise InvalidDirectionError(str(raw))

    @property
    def opposite(self) -> "VoteDirection":
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP

    @property
    def voter_set(self) -> "VoterSet":
        """Voter set holding users with an active vote in this direction."""
        return VoterSet.UPVOTERS if self is VoteDirection.UP else VoterSet.DOWNVOTERS


class VoterSet(str, Enum):
    """Voter membership sets stored on a complaint.

    Values are the complaint field names.
    """

    UPVOTERS = "upvoter_ids"
    DOWNVOTERS = "downvoter_ids"

    @property
    def count_field(self) -> str:
        return "upvote_count" if self is VoterSet.UPVOTERS else "downvote_count"

    @property
    def score_weight(self) -> int:
        """Contribution of one member of this set to the score."""
        return 1 if self is VoterSet.UPVOTERS else -1


class ComplaintStatus(str, Enum):
    """Moderation status of a complaint."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PetitionStatus(str, Enum):
    """Moderation status of a petition."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CLOSED = "closed"


class Role(str, Enum):
    """Role carried in the auth token."""

    MEMBER = "member"
    ADMIN = "admin"
