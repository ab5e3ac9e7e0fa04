"""Data models for character mastery statistics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping

from ..constants import (
    CONTENT_ALL,
    CONTENT_FILTER_LABELS,
    CONTENT_KANA,
    CONTENT_KANJI,
    CONTENT_VOCABULARY,
)
from ..learning.accuracy import calculate_accuracy
from ..learning.content_type import ContentType
from ..learning.mastery import MasteryLevel

# Raw counters as supplied by the statistics store: {"あ": {"correct": 9, "incorrect": 1}}
RawCharacterCounts = Mapping[str, Mapping[str, int]]


class ContentFilter(Enum):
    """View selection over content types."""

    ALL = CONTENT_ALL
    KANA = CONTENT_KANA
    KANJI = CONTENT_KANJI
    VOCABULARY = CONTENT_VOCABULARY

    @property
    def label(self) -> str:
        """Get tab label for this filter."""
        return CONTENT_FILTER_LABELS[self.value]

    def matches(self, content_type: ContentType) -> bool:
        """Check whether a content type passes this filter."""
        return self is ContentFilter.ALL or self.value == content_type.value

    @classmethod
    def from_string(cls, value: str) -> "ContentFilter":
        """Convert string to ContentFilter, falling back to ALL."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            return cls.ALL


class RankingMode(Enum):
    """Ordering and inclusion rule for top-N extraction."""

    DIFFICULT = "difficult"
    MASTERED = "mastered"


@dataclass(frozen=True)
class CharacterMasteryRecord:
    """Derived mastery record for one practiced character."""

    character: str
    correct: int
    incorrect: int
    total: int
    accuracy: float
    mastery_level: MasteryLevel
    content_type: ContentType


@dataclass
class MasterySummary:
    """Summary counts over a set of mastery records."""

    total_characters: int
    mastered_count: int
    learning_count: int
    needs_practice_count: int
    total_attempts: int
    correct_attempts: int
    accuracy_percentage: float


@dataclass
class MasteryView:
    """Filtered, ranked and grouped view over mastery records."""

    content_filter: ContentFilter
    filtered: List[CharacterMasteryRecord] = field(default_factory=list)
    top_difficult: List[CharacterMasteryRecord] = field(default_factory=list)
    top_mastered: List[CharacterMasteryRecord] = field(default_factory=list)
    grouped_by_mastery: Dict[MasteryLevel, List[CharacterMasteryRecord]] = field(
        default_factory=lambda: {level: [] for level in MasteryLevel}
    )

    @property
    def has_characters(self) -> bool:
        """Whether any character passed the content filter."""
        return len(self.filtered) > 0

    @property
    def level_counts(self) -> Dict[MasteryLevel, int]:
        """Count of characters in each mastery level."""
        return {level: len(self.grouped_by_mastery[level]) for level in MasteryLevel}

    def summary(self) -> MasterySummary:
        """Summarize the filtered records."""
        counts = self.level_counts
        total_attempts = sum(r.total for r in self.filtered)
        correct_attempts = sum(r.correct for r in self.filtered)
        accuracy = calculate_accuracy(correct_attempts, total_attempts - correct_attempts)

        return MasterySummary(
            total_characters=len(self.filtered),
            mastered_count=counts[MasteryLevel.MASTERED],
            learning_count=counts[MasteryLevel.LEARNING],
            needs_practice_count=counts[MasteryLevel.NEEDS_PRACTICE],
            total_attempts=total_attempts,
            correct_attempts=correct_attempts,
            accuracy_percentage=accuracy,
        )
