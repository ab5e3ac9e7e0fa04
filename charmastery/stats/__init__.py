"""Character mastery records and views."""

from .models import (
    CharacterMasteryRecord,
    ContentFilter,
    MasterySummary,
    MasteryView,
    RankingMode,
    RawCharacterCounts,
)

__all__ = [
    "CharacterMasteryRecord",
    "ContentFilter",
    "MasterySummary",
    "MasteryView",
    "RankingMode",
    "RawCharacterCounts",
]
