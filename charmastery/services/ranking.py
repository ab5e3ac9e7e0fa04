"""Top-N ranking of mastery records."""

from typing import List, Sequence, Union

from ..constants import DIFFICULT_MIN_ATTEMPTS
from ..learning.mastery import MasteryLevel
from ..stats.models import CharacterMasteryRecord, RankingMode


def get_top_characters(
    records: Sequence[CharacterMasteryRecord],
    count: int,
    mode: Union[RankingMode, str],
    min_attempts: int = DIFFICULT_MIN_ATTEMPTS,
) -> List[CharacterMasteryRecord]:
    """Get the top characters for a ranking mode.

    DIFFICULT keeps characters with at least ``min_attempts`` attempts and
    puts the lowest accuracy first. MASTERED keeps mastered characters and
    puts the highest accuracy first. Equal accuracies keep their input order.

    Args:
        records: Mastery records to rank
        count: Maximum number of records to return
        mode: Ranking mode, or its string value
        min_attempts: Minimum attempts for the DIFFICULT ranking

    Returns:
        Up to ``count`` records, fewer if fewer qualify
    """
    mode = RankingMode(mode)

    if mode == RankingMode.DIFFICULT:
        eligible = [r for r in records if r.total >= min_attempts]
        ranked = sorted(eligible, key=lambda r: r.accuracy)
    else:
        eligible = [r for r in records if r.mastery_level == MasteryLevel.MASTERED]
        # Negated key instead of reverse=True so ties keep input order
        ranked = sorted(eligible, key=lambda r: -r.accuracy)

    return ranked[: max(count, 0)]
