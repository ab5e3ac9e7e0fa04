"""Content type detection for practiced characters."""

from enum import Enum
from typing import Iterable, Optional, Tuple

from ..config import ContentTypeConfig
from ..constants import CONTENT_KANA, CONTENT_KANJI, CONTENT_VOCABULARY


class ContentType(Enum):
    """Script category of a practiced item."""

    KANA = CONTENT_KANA
    KANJI = CONTENT_KANJI
    VOCABULARY = CONTENT_VOCABULARY


def _in_ranges(code_point: int, ranges: Iterable[Tuple[int, int]]) -> bool:
    return any(start <= code_point <= end for start, end in ranges)


class ContentTypeDetector:
    """Classifies a character string as kana, kanji or vocabulary."""

    def __init__(self, config: Optional[ContentTypeConfig] = None):
        self.config = config or ContentTypeConfig()

    def is_kana(self, symbol: str) -> bool:
        """Check whether a single symbol is a kana."""
        return len(symbol) == 1 and _in_ranges(ord(symbol), self.config.kana_ranges)

    def is_kanji(self, symbol: str) -> bool:
        """Check whether a single symbol is a kanji."""
        return len(symbol) == 1 and _in_ranges(ord(symbol), self.config.kanji_ranges)

    def detect(self, character: str) -> ContentType:
        """Detect the content type of a practiced item.

        Only single symbols are kana or kanji. Anything longer, empty, or
        outside both scripts counts as vocabulary.

        Args:
            character: The practiced item (one or more symbols)

        Returns:
            Detected ContentType
        """
        if self.is_kana(character):
            return ContentType.KANA
        if self.is_kanji(character):
            return ContentType.KANJI
        return ContentType.VOCABULARY


_default_detector = ContentTypeDetector()


def detect_content_type(character: str) -> ContentType:
    """Detect the content type using the default Unicode ranges."""
    return _default_detector.detect(character)
