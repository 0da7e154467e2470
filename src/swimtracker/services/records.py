"""Per-event rankings across all swimmers."""

from collections.abc import Iterable

from swimtracker.logging import get_logger
from swimtracker.models.event import Distance, EventKey, PoolSize, Style
from swimtracker.models.summaries import EventRecords
from swimtracker.models.time_record import TimeRecord
from swimtracker.services.grouping import group_reduce

logger = get_logger(__name__)


def filter_records(
    records: Iterable[TimeRecord],
    distance: Distance | None = None,
    style: Style | None = None,
    pool_size: PoolSize | None = None,
) -> list[TimeRecord]:
    """Keep records matching every given filter. None means no filter."""
    return [
        r
        for r in records
        if (distance is None or r.distance == distance)
        and (style is None or r.style == style)
        and (pool_size is None or r.pool_size == pool_size)
    ]


def _append(times: list[TimeRecord], record: TimeRecord) -> list[TimeRecord]:
    times.append(record)
    return times


def group_records(
    records: Iterable[TimeRecord],
    distance: Distance | None = None,
    style: Style | None = None,
    pool_size: PoolSize | None = None,
) -> dict[EventKey, EventRecords]:
    """Group filtered records by event, fastest first within each event.

    Events appear in the order of their fastest time across the filtered
    records.

    Args:
        records: All time records
        distance: Only this distance, or None for all
        style: Only this style, or None for all
        pool_size: Only this pool size, or None for all

    Returns:
        Mapping from event key to the event's ranked times
    """
    matching = filter_records(records, distance=distance, style=style, pool_size=pool_size)
    matching.sort(key=lambda r: r.total_seconds)

    grouped = group_reduce(
        matching,
        key=lambda r: r.event_key,
        initial=lambda r: [r],
        merge=_append,
    )
    result = {
        key: EventRecords(
            distance=key.distance,
            style=key.style,
            pool_size=key.pool_size,
            times=times,
        )
        for key, times in grouped.items()
    }

    logger.debug("records_grouped", events=len(result), times=len(matching))
    return result
