"""Business logic services."""

from .ranking import get_top_characters
from .transformer import CharacterStatsTransformer
from .view_service import MasteryViewService, build_mastery_view

__all__ = [
    "CharacterStatsTransformer",
    "MasteryViewService",
    "build_mastery_view",
    "get_top_characters",
]
