"""Derived views computed from a snapshot of swimmers and time records."""

import datetime
from typing import Literal

from pydantic import BaseModel, computed_field

from swimtracker.models.event import Distance, EventKey, PoolSize, Style
from swimtracker.models.swimmer import Swimmer
from swimtracker.models.time_record import TimeRecord


class CompetitionSummary(BaseModel):
    """Points and event count for one competition in a swimmer's history."""

    name: str
    location: str
    date: datetime.date  # Latest race date seen for this competition
    points: int = 0
    events: int = 0


class LeaderboardEntry(BaseModel):
    """A swimmer's standing on the leaderboard."""

    id: str
    name: str
    location: str = ""
    total_points: int = 0
    race_count: int = 0

    @classmethod
    def for_swimmer(cls, swimmer: Swimmer, total_points: int, race_count: int) -> "LeaderboardEntry":
        return cls(
            id=swimmer.id,
            name=swimmer.name,
            location=swimmer.location,
            total_points=total_points,
            race_count=race_count,
        )


class EventRecords(BaseModel):
    """All times for one event, fastest first.

    Rank within the event is the 1-based position in `times`.
    """

    distance: Distance
    style: Style
    pool_size: PoolSize
    times: list[TimeRecord] = []

    @property
    def key(self) -> EventKey:
        return EventKey(distance=self.distance, style=self.style, pool_size=self.pool_size)

    @property
    def best(self) -> TimeRecord | None:
        """Fastest time in the event, if any."""
        return self.times[0] if self.times else None

    def ranked(self) -> list[tuple[int, TimeRecord]]:
        """Times paired with their 1-based rank."""
        return list(enumerate(self.times, start=1))


class HeadToHeadEntry(BaseModel):
    """Two swimmers' best times in one event.

    winner is 1 or 2. When the times are exactly equal swimmer 2 is reported
    as the winner.
    """

    key: EventKey
    swimmer1_time: TimeRecord | None = None
    swimmer2_time: TimeRecord | None = None
    winner: Literal[1, 2]

    @computed_field
    @property
    def event(self) -> str:
        """Event label, e.g. '200m Freestyle (50m)'."""
        return self.key.label


class SwimmerProfile(BaseModel):
    """Dashboard data for a single swimmer."""

    swimmer: Swimmer
    total_points: int = 0
    race_count: int = 0
    personal_bests: list[TimeRecord] = []
    recent: list[TimeRecord] = []
    competitions: list[CompetitionSummary] = []
