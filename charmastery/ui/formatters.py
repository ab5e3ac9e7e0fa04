"""Shared plain-text formatting utilities for mastery reports."""

from ..constants import MASTERY_EMOJI
from ..stats.models import CharacterMasteryRecord, MasterySummary


def format_accuracy(accuracy: float) -> str:
    """Format an accuracy percentage without decimals.

    Args:
        accuracy: Accuracy in the range 0-100

    Returns:
        String like "90%"
    """
    return f"{accuracy:.0f}%"


def format_attempts(total: int) -> str:
    """Format an attempt count, e.g. "10 tries"."""
    return f"{total} tries"


def get_mastery_emoji(level: str) -> str:
    """Get emoji for a mastery level.

    Args:
        level: Mastery level string (mastered, learning, needs-practice)

    Returns:
        Emoji string for the level, or ⬜ for unknown levels
    """
    return MASTERY_EMOJI.get(level, "⬜")


def format_character_row(index: int, record: CharacterMasteryRecord) -> str:
    """Format one ranked character as a report line."""
    return (
        f"{index}. {record.character}  "
        f"{format_accuracy(record.accuracy)}  "
        f"({format_attempts(record.total)})"
    )


def format_mastery_summary(summary: MasterySummary) -> str:
    """Get a one-line summary of mastery counts."""
    if summary.total_characters == 0:
        return "No characters practiced yet"

    return (
        f"{get_mastery_emoji('mastered')} {summary.mastered_count} | "
        f"{get_mastery_emoji('learning')} {summary.learning_count} | "
        f"{get_mastery_emoji('needs-practice')} {summary.needs_practice_count} | "
        f"{format_accuracy(summary.accuracy_percentage)} overall"
    )
