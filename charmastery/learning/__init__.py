"""Classification of practiced characters."""

from .accuracy import calculate_accuracy
from .content_type import ContentType, ContentTypeDetector, detect_content_type
from .mastery import MasteryClassifier, MasteryLevel, classify_character

__all__ = [
    "ContentType",
    "ContentTypeDetector",
    "MasteryClassifier",
    "MasteryLevel",
    "calculate_accuracy",
    "classify_character",
    "detect_content_type",
]
