"""Plain-text formatting helpers."""

from .formatters import (
    format_accuracy,
    format_attempts,
    format_character_row,
    format_mastery_summary,
    get_mastery_emoji,
)

__all__ = [
    "format_accuracy",
    "format_attempts",
    "format_character_row",
    "format_mastery_summary",
    "get_mastery_emoji",
]
