"""Petition use cases."""

from .sign_petition import SignPetitionRequest, SignPetitionResponse, SignPetitionUseCase

__all__ = [
    "SignPetitionRequest",
    "SignPetitionResponse",
    "SignPetitionUseCase",
]
