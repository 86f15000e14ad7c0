"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .petition_service import PetitionService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "ModerationService",
    "PetitionService",
    "Service",
    "VoteService",
]
