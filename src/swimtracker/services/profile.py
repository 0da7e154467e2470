"""Swimmer dashboard: totals, personal bests, recent races and competitions."""

from collections.abc import Iterable

from swimtracker.models.event import EVENT_COMBINATIONS
from swimtracker.models.summaries import SwimmerProfile
from swimtracker.models.swimmer import Swimmer
from swimtracker.models.time_record import TimeRecord
from swimtracker.services.best_times import index_best_times
from swimtracker.services.competitions import aggregate_by_competition

DEFAULT_RECENT_LIMIT = 10


def swimmer_times(swimmer_id: str, records: Iterable[TimeRecord]) -> list[TimeRecord]:
    """All records belonging to one swimmer, in input order."""
    return [r for r in records if r.swimmer_id == swimmer_id]


def total_points(records: Iterable[TimeRecord]) -> int:
    """Sum of placement points."""
    return sum(r.points for r in records)


def recent_times(
    records: Iterable[TimeRecord], limit: int = DEFAULT_RECENT_LIMIT
) -> list[TimeRecord]:
    """Most recent races first, at most `limit` of them.

    Races on the same date keep their input order.
    """
    return sorted(records, key=lambda r: r.date, reverse=True)[:limit]


def build_profile(
    swimmer: Swimmer,
    records: Iterable[TimeRecord],
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> SwimmerProfile:
    """Collect everything a swimmer's dashboard shows.

    Personal bests are listed in event order (style, distance, pool size).

    Args:
        swimmer: The swimmer
        records: All time records; other swimmers' records are ignored
        recent_limit: How many recent races to include

    Returns:
        The swimmer's profile
    """
    own = swimmer_times(swimmer.id, records)
    bests = index_best_times(own)

    return SwimmerProfile(
        swimmer=swimmer,
        total_points=total_points(own),
        race_count=len(own),
        personal_bests=[bests[key] for key in EVENT_COMBINATIONS if key in bests],
        recent=recent_times(own, recent_limit),
        competitions=aggregate_by_competition(own),
    )
