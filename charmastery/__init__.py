"""Character mastery classification, ranking and aggregation."""

from .config import Config, load_config
from .learning import (
    ContentType,
    MasteryLevel,
    calculate_accuracy,
    classify_character,
    detect_content_type,
)
from .services import (
    CharacterStatsTransformer,
    MasteryViewService,
    build_mastery_view,
    get_top_characters,
)
from .stats import CharacterMasteryRecord, ContentFilter, MasteryView, RankingMode

__all__ = [
    "CharacterMasteryRecord",
    "CharacterStatsTransformer",
    "Config",
    "ContentFilter",
    "ContentType",
    "MasteryLevel",
    "MasteryView",
    "MasteryViewService",
    "RankingMode",
    "build_mastery_view",
    "calculate_accuracy",
    "classify_character",
    "detect_content_type",
    "get_top_characters",
    "load_config",
]
