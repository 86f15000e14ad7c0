"""Domain models for Ombud."""

from ombud.domain.model.complaint import Complaint
from ombud.domain.model.petition import Petition, SignatureResult
from ombud.domain.model.vote import (
    PriorVote,
    VoteMatch,
    VoteMutation,
    VoteResult,
    plan_vote,
)

__all__ = [
    "Complaint",
    "Petition",
    "PriorVote",
    "SignatureResult",
    "VoteMatch",
    "VoteMutation",
    "VoteResult",
    "plan_vote",
]
