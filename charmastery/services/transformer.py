"""Transformation of raw practice counters into mastery records."""

import logging
from typing import List, Optional

from .base import BaseService
from ..config import Config
from ..learning.accuracy import calculate_accuracy
from ..learning.content_type import ContentTypeDetector
from ..learning.mastery import MasteryClassifier
from ..stats.models import CharacterMasteryRecord, RawCharacterCounts

logger = logging.getLogger(__name__)


class CharacterStatsTransformer(BaseService):
    """Builds one CharacterMasteryRecord per practiced character."""

    def __init__(
        self,
        config: Optional[Config] = None,
        classifier: Optional[MasteryClassifier] = None,
        detector: Optional[ContentTypeDetector] = None,
    ):
        super().__init__(config)
        self.classifier = classifier or MasteryClassifier(self.config.mastery)
        self.detector = detector or ContentTypeDetector(self.config.content_type)

    def build_record(self, character: str, correct: int, incorrect: int) -> CharacterMasteryRecord:
        """Build the mastery record for a single character.

        Args:
            character: The practiced item
            correct: Number of correct attempts
            incorrect: Number of incorrect attempts

        Returns:
            CharacterMasteryRecord with derived fields filled in
        """
        return CharacterMasteryRecord(
            character=character,
            correct=correct,
            incorrect=incorrect,
            total=correct + incorrect,
            accuracy=calculate_accuracy(correct, incorrect),
            mastery_level=self.classifier.classify(correct, incorrect),
            content_type=self.detector.detect(character),
        )

    def transform(self, raw: RawCharacterCounts) -> List[CharacterMasteryRecord]:
        """Transform raw counters into mastery records.

        Args:
            raw: Mapping of character to {"correct": int, "incorrect": int}

        Returns:
            List of records in the mapping's iteration order
        """
        records = [
            self.build_record(
                character,
                stats.get("correct", 0),
                stats.get("incorrect", 0),
            )
            for character, stats in raw.items()
        ]
        logger.debug(f"Transformed {len(records)} character records")
        return records
