"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from ombud.domain.model import Complaint, Petition
from ombud.domain.value import (
    ComplaintId,
    ComplaintStatus,
    PetitionId,
    PetitionStatus,
    UserId,
)

os.environ.setdefault("ENVIRONMENT", "test")

# Spans and events are recorded but never exported or printed
logfire.configure(send_to_logfire=False, console=False)


def new_user_id() -> UserId:
    return UserId(uuid4())


def make_complaint(
    status: ComplaintStatus = ComplaintStatus.APPROVED,
    upvoters: Sequence[UserId] = (),
    downvoters: Sequence[UserId] = (),
    complaint_id: Optional[ComplaintId] = None,
) -> Complaint:
    """Build a complaint whose tallies agree with the given voters."""
    return Complaint(
        id=complaint_id or ComplaintId(uuid4()),
        text="The canteen has been closed for three weeks without notice.",
        tags=["Facilities", " canteen "],
        status=status,
        upvote_count=len(upvoters),
        downvote_count=len(downvoters),
        score=len(upvoters) - len(downvoters),
        upvoter_ids=tuple(upvoters),
        downvoter_ids=tuple(downvoters),
        created_at=datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc),
    )


def make_petition(
    status: PetitionStatus = PetitionStatus.APPROVED,
    signers: Sequence[UserId] = (),
    goal: Optional[int] = None,
    deadline: Optional[datetime] = None,
    petition_id: Optional[PetitionId] = None,
) -> Petition:
    """Build a petition whose signature count agrees with the given signers."""
    return Petition(
        id=petition_id or PetitionId(uuid4()),
        title="Reopen the canteen",
        description="The canteen has been closed without explanation.",
        demands="Reopen the canteen and publish a maintenance schedule.",
        creator_id=new_user_id(),
        tags=["facilities"],
        status=status,
        goal=goal,
        deadline=deadline,
        signer_ids=tuple(signers),
        signature_count=len(signers),
    )
