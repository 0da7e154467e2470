"""Head-to-head comparison of two swimmers' personal bests."""

from collections.abc import Sequence

from swimtracker.logging import get_logger
from swimtracker.models.event import EVENT_COMBINATIONS
from swimtracker.models.summaries import HeadToHeadEntry
from swimtracker.models.time_record import TimeRecord
from swimtracker.services.best_times import index_best_times

logger = get_logger(__name__)


def _winner(time1: TimeRecord | None, time2: TimeRecord | None) -> int:
    """1 or 2. Swimmer 1 must be strictly faster to win; equal times go to swimmer 2."""
    if time1 is None:
        return 2
    if time2 is None:
        return 1
    return 1 if time1.total_seconds < time2.total_seconds else 2


def compare_head_to_head(
    swimmer1_id: str,
    swimmer2_id: str,
    records: Sequence[TimeRecord],
) -> list[HeadToHeadEntry]:
    """Compare two swimmers' best times in every event either has swum.

    Events are listed by style, then distance, then pool size. Events
    neither swimmer has a time for are left out.

    Args:
        swimmer1_id: First swimmer's id
        swimmer2_id: Second swimmer's id
        records: All time records

    Returns:
        One entry per event with at least one time
    """
    if not swimmer1_id or not swimmer2_id:
        return []

    bests1 = index_best_times(r for r in records if r.swimmer_id == swimmer1_id)
    bests2 = index_best_times(r for r in records if r.swimmer_id == swimmer2_id)

    results: list[HeadToHeadEntry] = []
    for key in EVENT_COMBINATIONS:
        time1 = bests1.get(key)
        time2 = bests2.get(key)
        if time1 is None and time2 is None:
            continue
        results.append(
            HeadToHeadEntry(
                key=key,
                swimmer1_time=time1,
                swimmer2_time=time2,
                winner=_winner(time1, time2),
            )
        )

    logger.debug(
        "head_to_head_compared",
        swimmer1_id=swimmer1_id,
        swimmer2_id=swimmer2_id,
        events=len(results),
    )
    return results
