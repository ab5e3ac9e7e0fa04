"""Mastery classification for practiced characters."""

from enum import Enum
from typing import Optional

from ..config import MasteryConfig
from ..constants import (
    MASTERY_EMOJI,
    MASTERY_LABELS,
    MASTERY_LEARNING,
    MASTERY_MASTERED,
    MASTERY_NEEDS_PRACTICE,
)
from .accuracy import calculate_accuracy


class MasteryLevel(Enum):
    """Mastery levels for characters."""

    MASTERED = MASTERY_MASTERED
    LEARNING = MASTERY_LEARNING
    NEEDS_PRACTICE = MASTERY_NEEDS_PRACTICE

    @property
    def emoji(self) -> str:
        """Get emoji for this mastery level."""
        return MASTERY_EMOJI.get(self.value, "⬜")

    @property
    def display_name(self) -> str:
        """Get display name for this mastery level."""
        return MASTERY_LABELS[self.value]


class MasteryClassifier:
    """Classifier for determining character mastery levels."""

    def __init__(self, config: Optional[MasteryConfig] = None):
        self.config = config or MasteryConfig()

    def classify(self, correct: int, incorrect: int) -> MasteryLevel:
        """Classify a character from its practice counters.

        Characters with too few attempts stay in LEARNING whatever their
        accuracy, so a lucky first answer does not count as mastery.

        Args:
            correct: Number of correct attempts
            incorrect: Number of incorrect attempts

        Returns:
            Calculated MasteryLevel
        """
        total = correct + incorrect
        if total < self.config.min_attempts:
            return MasteryLevel.LEARNING

        accuracy = calculate_accuracy(correct, incorrect)

        if accuracy >= self.config.mastered_accuracy:
            return MasteryLevel.MASTERED

        if accuracy >= self.config.learning_accuracy:
            return MasteryLevel.LEARNING

        return MasteryLevel.NEEDS_PRACTICE

    def get_requirements_for_level(self, level: MasteryLevel) -> str:
        """Get human-readable requirements for a mastery level.

        Args:
            level: Target mastery level

        Returns:
            Description of requirements
        """
        min_attempts = self.config.min_attempts

        if level == MasteryLevel.MASTERED:
            return (
                f"At least {min_attempts} attempts with "
                f"{self.config.mastered_accuracy:.0f}%+ accuracy"
            )
        elif level == MasteryLevel.LEARNING:
            return (
                f"Fewer than {min_attempts} attempts, or "
                f"{self.config.learning_accuracy:.0f}%+ accuracy"
            )
        else:
            return (
                f"At least {min_attempts} attempts with less than "
                f"{self.config.learning_accuracy:.0f}% accuracy"
            )


_default_classifier = MasteryClassifier()


def classify_character(correct: int, incorrect: int) -> MasteryLevel:
    """Classify a character using the default thresholds."""
    return _default_classifier.classify(correct, incorrect)
