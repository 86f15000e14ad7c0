"""Unit tests for the Complaint model and vote planning."""

from uuid import uuid4

import pydantic
import pytest

from ombud.domain.model import (
    Complaint,
    PriorVote,
    VoteMatch,
    VoteMutation,
    plan_vote,
)
from ombud.domain.value import (
    ComplaintId,
    ComplaintStatus,
    VoteDirection,
    VoterSet,
)
from tests.conftest import make_complaint, new_user_id


class TestComplaintInvariants:
    """Tests for the vote-state validator."""

    def test_valid_vote_state_is_accepted(self):
        """Tallies that agree with the voter sets should validate."""
        u1, u2, u3 = new_user_id(), new_user_id(), new_user_id()

        complaint = make_complaint(upvoters=[u1, u2], downvoters=[u3])

        assert complaint.upvote_count == 2
        assert complaint.downvote_count == 1
        assert complaint.score == 1

    def test_tags_are_normalized(self):
        """Tags should be trimmed and lowercased."""
        complaint = make_complaint()

        assert complaint.tags == ("facilities", "canteen")

    def test_user_in_both_sets_is_rejected(self):
        """A user cannot hold an upvote and a downvote at once."""
        u1 = new_user_id()

        with pytest.raises(pydantic.ValidationError, match="both upvote and downvote"):
            make_complaint(upvoters=[u1], downvoters=[u1])

    def test_duplicate_voter_is_rejected(self):
        """A voter set cannot contain the same user twice."""
        u1 = new_user_id()

        with pytest.raises(pydantic.ValidationError, match="duplicates"):
            Complaint(
                id=ComplaintId(uuid4()),
                text="Broken heating",
                upvote_count=2,
                score=2,
                upvoter_ids=(u1, u1),
            )

    def test_count_mismatch_is_rejected(self):
        """upvote_count must equal the number of upvoters."""
        with pytest.raises(pydantic.ValidationError, match="upvote_count"):
            Complaint(
                id=ComplaintId(uuid4()),
                text="Broken heating",
                upvote_count=1,
                score=1,
            )

    def test_score_mismatch_is_rejected(self):
        """score must equal upvote_count - downvote_count."""
        with pytest.raises(pydantic.ValidationError, match="score"):
            Complaint(
                id=ComplaintId(uuid4()),
                text="Broken heating",
                upvote_count=1,
                score=5,
                upvoter_ids=(new_user_id(),),
            )

    def test_only_approved_complaints_are_votable(self):
        """Pending and rejected complaints should not accept votes."""
        assert make_complaint(status=ComplaintStatus.APPROVED).is_votable
        assert not make_complaint(status=ComplaintStatus.PENDING).is_votable
        assert not make_complaint(status=ComplaintStatus.REJECTED).is_votable


class TestPriorVote:
    """Tests for classifying a user's prior vote."""

    def test_no_prior_vote(self):
        complaint = make_complaint()

        assert PriorVote.of(complaint, new_user_id(), VoteDirection.UP) is PriorVote.NONE

    def test_same_prior_vote(self):
        u1 = new_user_id()
        complaint = make_complaint(downvoters=[u1])

        assert PriorVote.of(complaint, u1, VoteDirection.DOWN) is PriorVote.SAME

    def test_opposite_prior_vote(self):
        u1 = new_user_id()
        complaint = make_complaint(upvoters=[u1])

        assert PriorVote.of(complaint, u1, VoteDirection.DOWN) is PriorVote.OPPOSITE


class TestPlanVote:
    """Tests for the conditional update built for each transition."""

    def test_new_vote_requires_absence_from_both_sets(self):
        """Adding a vote should only match if the user has no vote at all."""
        u1 = new_user_id()
        complaint = make_complaint()

        match, mutation = plan_vote(complaint.id, u1, VoteDirection.UP, PriorVote.NONE)

        assert match.absent_from == {VoterSet.UPVOTERS, VoterSet.DOWNVOTERS}
        assert match.present_in == frozenset()
        assert match.status == ComplaintStatus.APPROVED
        assert mutation.add_to == VoterSet.UPVOTERS
        assert mutation.remove_from is None
        assert mutation.score_delta == 1

    def test_toggle_off_requires_presence(self):
        """Removing a vote should only match if the user still holds it."""
        u1 = new_user_id()
        complaint = make_complaint(downvoters=[u1])

        match, mutation = plan_vote(complaint.id, u1, VoteDirection.DOWN, PriorVote.SAME)

        assert match.present_in == {VoterSet.DOWNVOTERS}
        assert mutation.remove_from == VoterSet.DOWNVOTERS
        assert mutation.add_to is None
        assert mutation.score_delta == 1

    def test_switch_moves_between_sets(self):
        """Switching sides should swing the score by two."""
        u1 = new_user_id()
        complaint = make_complaint(upvoters=[u1])

        match, mutation = plan_vote(
            complaint.id, u1, VoteDirection.DOWN, PriorVote.OPPOSITE
        )

        assert match.present_in == {VoterSet.UPVOTERS}
        assert match.absent_from == {VoterSet.DOWNVOTERS}
        assert mutation.count_delta(VoterSet.UPVOTERS) == -1
        assert mutation.count_delta(VoterSet.DOWNVOTERS) == 1
        assert mutation.score_delta == -2

    def test_stale_plan_no_longer_matches(self):
        """A plan made before another write should be refused."""
        u1 = new_user_id()
        complaint = make_complaint()
        match, mutation = plan_vote(complaint.id, u1, VoteDirection.UP, PriorVote.NONE)

        after_first_write = mutation.apply(complaint)

        assert match.matches(complaint)
        assert not match.matches(after_first_write)

    def test_match_requires_approved_status(self):
        u1 = new_user_id()
        complaint = make_complaint(status=ComplaintStatus.PENDING)

        match = VoteMatch(complaint_id=complaint.id, user_id=u1)

        assert not match.matches(complaint)

    def test_apply_keeps_insertion_order(self):
        """New voters should be appended after existing ones."""
        u1, u2 = new_user_id(), new_user_id()
        complaint = make_complaint(upvoters=[u1])

        updated = VoteMutation(user_id=u2, add_to=VoterSet.UPVOTERS).apply(complaint)

        assert updated.upvoter_ids == (u1, u2)
        assert updated.upvote_count == 2
        assert updated.score == 2
        # The input snapshot is untouched
        assert complaint.upvoter_ids == (u1,)
