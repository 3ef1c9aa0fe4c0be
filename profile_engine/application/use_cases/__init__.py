"""Application use cases module."""

from .profile_use_cases import BuildLayerProfileUseCase, CalculateTeamClimateUseCase
from .trait_use_cases import RefineTraitsUseCase

__all__ = [
    "BuildLayerProfileUseCase",
    "CalculateTeamClimateUseCase",
    "RefineTraitsUseCase",
]
