"""Service for the filtered, ranked and grouped mastery view."""

import logging
from typing import Optional, Sequence, Union

from .base import BaseService
from .ranking import get_top_characters
from .transformer import CharacterStatsTransformer
from ..config import Config
from ..constants import DIFFICULT_MIN_ATTEMPTS, TOP_CHARACTERS_COUNT
from ..learning.mastery import MasteryLevel
from ..stats.models import (
    CharacterMasteryRecord,
    ContentFilter,
    MasteryView,
    RankingMode,
    RawCharacterCounts,
)

logger = logging.getLogger(__name__)


def build_mastery_view(
    records: Sequence[CharacterMasteryRecord],
    content_filter: Union[ContentFilter, str] = ContentFilter.ALL,
    top_count: int = TOP_CHARACTERS_COUNT,
    min_attempts_for_difficult: int = DIFFICULT_MIN_ATTEMPTS,
) -> MasteryView:
    """Build the mastery view over a set of records.

    Args:
        records: Mastery records to aggregate
        content_filter: Content type to keep (ALL keeps everything)
        top_count: Size of the top difficult and top mastered lists
        min_attempts_for_difficult: Minimum attempts to rank as difficult

    Returns:
        MasteryView with filtered records, rankings and mastery groups
    """
    content_filter = ContentFilter(content_filter)
    filtered = [r for r in records if content_filter.matches(r.content_type)]

    grouped = {level: [] for level in MasteryLevel}
    for record in filtered:
        grouped[record.mastery_level].append(record)

    return MasteryView(
        content_filter=content_filter,
        filtered=filtered,
        top_difficult=get_top_characters(
            filtered, top_count, RankingMode.DIFFICULT, min_attempts_for_difficult
        ),
        top_mastered=get_top_characters(filtered, top_count, RankingMode.MASTERED),
        grouped_by_mastery=grouped,
    )


class MasteryViewService(BaseService):
    """Service that turns raw counters into a mastery view."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transformer: Optional[CharacterStatsTransformer] = None,
    ):
        super().__init__(config)
        self.transformer = transformer or CharacterStatsTransformer(self.config)

    def build_view(
        self,
        raw: RawCharacterCounts,
        content_filter: Union[ContentFilter, str] = ContentFilter.ALL,
    ) -> MasteryView:
        """Build the mastery view for raw practice counters.

        Recomputed from scratch on every call.

        Args:
            raw: Mapping of character to {"correct": int, "incorrect": int}
            content_filter: Content type to keep

        Returns:
            MasteryView for the selected content type
        """
        records = self.transformer.transform(raw)
        view = build_mastery_view(
            records,
            content_filter,
            top_count=self.config.ranking.top_count,
            min_attempts_for_difficult=self.config.ranking.min_attempts_for_difficult,
        )
        logger.debug(
            f"Built {view.content_filter.value} view: {len(view.filtered)} of "
            f"{len(records)} characters"
        )
        return view
