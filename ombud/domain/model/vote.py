"""Vote transition models.

A vote is not persisted as its own entity: it is a user's membership in one
of a complaint's voter sets. Casting a vote is planned here as a match
predicate plus a mutation, which the repository applies as one atomic
conditional update.
"""

from enum import Enum
from typing import Optional

from ombud.domain.model.common import DomainModel
from ombud.domain.model.complaint import Complaint
from ombud.domain.value import (
    ComplaintId,
    ComplaintStatus,
    UserId,
    VoteDirection,
    VoterSet,
)


class PriorVote(str, Enum):
    """A user's relationship to a complaint relative to a requested direction."""

    NONE = "none"
    SAME = "same"
    OPPOSITE = "opposite"

    @classmethod
    def of(
        cls, complaint: Complaint, user_id: UserId, direction: VoteDirection
    ) -> "PriorVote":
        if complaint.is_member(direction.voter_set, user_id):
            return cls.SAME
        if complaint.is_member(direction.opposite.voter_set, user_id):
            return cls.OPPOSITE
        return cls.NONE


class VoteMatch(DomainModel):
    """Predicate a complaint must satisfy at write time."""

    complaint_id: ComplaintId
    user_id: UserId
    status: ComplaintStatus = ComplaintStatus.APPROVED
    present_in: frozenset[VoterSet] = frozenset()
    absent_from: frozenset[VoterSet] = frozenset()

    def matches(self, complaint: Complaint) -> bool:
        """Evaluate the predicate against a complaint snapshot."""
        if complaint.id != self.complaint_id or complaint.status != self.status:
            return False
        if not all(complaint.is_member(s, self.user_id) for s in self.present_in):
            return False
        return not any(complaint.is_member(s, self.user_id) for s in self.absent_from)


class VoteMutation(DomainModel):
    """Membership change plus the tally deltas it implies."""

    user_id: UserId
    add_to: Optional[VoterSet] = None
    remove_from: Optional[VoterSet] = None

    def count_delta(self, voter_set: VoterSet) -> int:
        delta = 0
        if self.add_to == voter_set:
            delta += 1
        if self.remove_from == voter_set:
            delta -= 1
        return delta

    @property
    def score_delta(self) -> int:
        return sum(self.count_delta(s) * s.score_weight for s in VoterSet)

    def apply(self, complaint: Complaint) -> Complaint:
        """Return the complaint with the mutation applied.

        Only meaningful on a complaint the matching VoteMatch accepted.
        """
        changes: dict[str, object] = {"score": complaint.score + self.score_delta}
        for voter_set in VoterSet:
            voters = list(complaint.voters(voter_set))
            if self.remove_from == voter_set:
                voters = [v for v in voters if v != self.user_id]
            if self.add_to == voter_set:
                voters.append(self.user_id)
            changes[voter_set.value] = tuple(voters)
            changes[voter_set.count_field] = (
                getattr(complaint, voter_set.count_field) + self.count_delta(voter_set)
            )
        return Complaint.model_validate({**complaint.model_dump(), **changes})


def plan_vote(
    complaint_id: ComplaintId,
    user_id: UserId,
    direction: VoteDirection,
    prior: PriorVote,
) -> tuple[VoteMatch, VoteMutation]:
    """Build the conditional update for one vote transition.

    The match re-asserts ``prior`` so a stale decision cannot be applied.
    """
    target = direction.voter_set
    other = direction.opposite.voter_set

    if prior is PriorVote.SAME:
        # Toggle-off
        match = VoteMatch(
            complaint_id=complaint_id, user_id=user_id, present_in=frozenset({target})
        )
        mutation = VoteMutation(user_id=user_id, remove_from=target)
    elif prior is PriorVote.OPPOSITE:
        # Full swing
        match = VoteMatch(
            complaint_id=complaint_id,
            user_id=user_id,
            present_in=frozenset({other}),
            absent_from=frozenset({target}),
        )
        mutation = VoteMutation(user_id=user_id, add_to=target, remove_from=other)
    else:
        match = VoteMatch(
            complaint_id=complaint_id,
            user_id=user_id,
            absent_from=frozenset({target, other}),
        )
        mutation = VoteMutation(user_id=user_id, add_to=target)

    return match, mutation


class VoteResult(DomainModel):
    """Vote state of a complaint after a transition."""

    upvote_count: int
    downvote_count: int
    score: int
    upvoter_ids: list[UserId]
    downvoter_ids: list[UserId]

    @classmethod
    def from_complaint(cls, complaint: Complaint) -> "VoteResult":
        return cls(
            upvote_count=complaint.upvote_count,
            downvote_count=complaint.downvote_count,
            score=complaint.score,
            upvoter_ids=list(complaint.upvoter_ids),
            downvoter_ids=list(complaint.downvoter_ids),
        )
