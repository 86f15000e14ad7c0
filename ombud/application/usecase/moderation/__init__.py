"""Moderation use cases."""

from .review_complaint import (
    ReviewComplaintRequest,
    ReviewComplaintResponse,
    ReviewComplaintUseCase,
)
from .review_petition import (
    ReviewPetitionRequest,
    ReviewPetitionResponse,
    ReviewPetitionUseCase,
)

__all__ = [
    "ReviewComplaintRequest",
    "ReviewComplaintResponse",
    "ReviewComplaintUseCase",
    "ReviewPetitionRequest",
    "ReviewPetitionResponse",
    "ReviewPetitionUseCase",
]
