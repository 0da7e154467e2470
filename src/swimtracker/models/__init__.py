"""Pydantic models for swim race tracking."""

from swimtracker.models.event import (
    DEFAULT_POOL_SIZE,
    EVENT_COMBINATIONS,
    Distance,
    EventKey,
    PoolSize,
    Style,
)
from swimtracker.models.summaries import (
    CompetitionSummary,
    EventRecords,
    HeadToHeadEntry,
    LeaderboardEntry,
    SwimmerProfile,
)
from swimtracker.models.swimmer import Swimmer, new_id
from swimtracker.models.time_record import TimeRecord

__all__ = [
    # Event
    "DEFAULT_POOL_SIZE",
    "Distance",
    "EVENT_COMBINATIONS",
    "EventKey",
    "PoolSize",
    "Style",
    # Swimmer
    "Swimmer",
    "new_id",
    # Time Record
    "TimeRecord",
    # Summaries
    "CompetitionSummary",
    "EventRecords",
    "HeadToHeadEntry",
    "LeaderboardEntry",
    "SwimmerProfile",
]
