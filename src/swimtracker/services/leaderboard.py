"""Club leaderboard by total placement points."""

from collections import Counter
from collections.abc import Iterable, Sequence

from swimtracker.logging import get_logger
from swimtracker.models.summaries import LeaderboardEntry
from swimtracker.models.swimmer import Swimmer
from swimtracker.models.time_record import TimeRecord

logger = get_logger(__name__)


def rank_leaderboard(
    swimmers: Sequence[Swimmer],
    records: Iterable[TimeRecord],
) -> list[LeaderboardEntry]:
    """Rank swimmers by the sum of their placement points.

    Swimmers with equal totals keep their order from `swimmers` (stable
    sort). Records whose swimmer is not in `swimmers` are ignored.

    Args:
        swimmers: All swimmers
        records: All time records

    Returns:
        Leaderboard entries, highest total first
    """
    points: Counter[str] = Counter()
    races: Counter[str] = Counter()
    for record in records:
        points[record.swimmer_id] += record.points
        races[record.swimmer_id] += 1

    entries = [
        LeaderboardEntry.for_swimmer(swimmer, points[swimmer.id], races[swimmer.id])
        for swimmer in swimmers
    ]
    entries.sort(key=lambda e: e.total_points, reverse=True)

    logger.debug("leaderboard_ranked", swimmers=len(entries))
    return entries
