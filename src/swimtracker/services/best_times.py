"""Personal best lookup per event."""

from collections.abc import Iterable, Mapping

from swimtracker.logging import get_logger
from swimtracker.models.event import EventKey
from swimtracker.models.time_record import TimeRecord
from swimtracker.services.grouping import group_reduce

logger = get_logger(__name__)


def _faster(best: TimeRecord, candidate: TimeRecord) -> TimeRecord:
    # Strict comparison: on a tie the record seen first stays best
    return candidate if candidate.total_seconds < best.total_seconds else best


def index_best_times(records: Iterable[TimeRecord]) -> dict[EventKey, TimeRecord]:
    """Find the fastest record for each (distance, style, pool size).

    Pass one swimmer's records to get that swimmer's personal bests.

    Args:
        records: Time records to index

    Returns:
        Mapping from event key to the fastest record for that event
    """
    bests = group_reduce(
        records,
        key=lambda r: r.event_key,
        initial=lambda r: r,
        merge=_faster,
    )
    logger.debug("best_times_indexed", events=len(bests))
    return bests


def is_personal_best(record: TimeRecord, bests: Mapping[EventKey, TimeRecord]) -> bool:
    """Check whether a record is the current best for its event (compared by id)."""
    best = bests.get(record.event_key)
    return best is not None and best.id == record.id
