"""Per-competition totals for a swimmer's race history."""

from collections.abc import Iterable

from swimtracker.logging import get_logger
from swimtracker.models.summaries import CompetitionSummary
from swimtracker.models.time_record import TimeRecord
from swimtracker.services.grouping import group_reduce

logger = get_logger(__name__)


def _start(record: TimeRecord) -> CompetitionSummary:
    return CompetitionSummary(
        name=record.competition,
        location=record.competition_location,
        date=record.date,
        points=record.points,
        events=1,
    )


def _add(summary: CompetitionSummary, record: TimeRecord) -> CompetitionSummary:
    update: dict = {
        "points": summary.points + record.points,
        "events": summary.events + 1,
    }
    # Location follows the most recent race of the competition
    if record.date > summary.date:
        update["date"] = record.date
        update["location"] = record.competition_location
    return summary.model_copy(update=update)


def aggregate_by_competition(records: Iterable[TimeRecord]) -> list[CompetitionSummary]:
    """Total points and events for each competition, most recent first.

    Competitions are identified by name alone, so records with the same
    competition name are merged even when they were swum on different dates.

    Args:
        records: One swimmer's time records

    Returns:
        Competition summaries sorted by latest date, descending
    """
    summaries = group_reduce(
        records,
        key=lambda r: r.competition,
        initial=_start,
        merge=_add,
    )
    result = sorted(summaries.values(), key=lambda s: s.date, reverse=True)
    logger.debug("competitions_aggregated", competitions=len(result))
    return result
