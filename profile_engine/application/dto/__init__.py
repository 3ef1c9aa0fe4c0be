"""Application DTOs module."""

from .profile_dto import InsightCardDTO, LayerDTO, LayerProfileDTO, RitualDTO
from .trait_dto import TraitScoreDTO, TraitVectorDTO

__all__ = [
    "InsightCardDTO",
    "LayerDTO",
    "LayerProfileDTO",
    "RitualDTO",
    "TraitScoreDTO",
    "TraitVectorDTO",
]
