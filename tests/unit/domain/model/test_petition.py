"""Unit tests for the Petition model."""

from datetime import datetime, timedelta, timezone

import pydantic
import pytest

from ombud.domain.model import SignatureResult
from ombud.domain.value import PetitionStatus
from tests.conftest import make_petition, new_user_id


class TestPetition:
    """Tests for petition rules."""

    def test_signature_count_must_match_signers(self):
        petition = make_petition(signers=[new_user_id()])

        with pytest.raises(pydantic.ValidationError, match="signature_count"):
            petition.model_validate({**petition.model_dump(), "signature_count": 3})

    def test_title_length_is_limited(self):
        petition = make_petition()

        with pytest.raises(pydantic.ValidationError):
            petition.model_validate({**petition.model_dump(), "title": "x" * 151})

    def test_open_for_signing_requires_approval(self):
        now = datetime.now(timezone.utc)

        assert make_petition().is_open_for_signing(now)
        assert not make_petition(status=PetitionStatus.PENDING).is_open_for_signing(now)
        assert not make_petition(status=PetitionStatus.CLOSED).is_open_for_signing(now)

    def test_not_open_after_deadline(self):
        now = datetime.now(timezone.utc)
        petition = make_petition(deadline=now - timedelta(days=1))

        assert not petition.is_open_for_signing(now)

    def test_goal_reached(self):
        signers = [new_user_id(), new_user_id()]

        result = SignatureResult.from_petition(make_petition(signers=signers, goal=2))

        assert result.goal_reached
        assert result.signature_count == 2
        assert result.signer_ids == signers

    def test_goal_not_set(self):
        assert not make_petition(signers=[new_user_id()]).goal_reached
