"""Ritual recommendation entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RitualRecommendation:
    """Short practice suggested from the layer profile."""

    ritual_id: str
    title: str
    description: str
    category: str
    duration: str
