"""Time record model for logged race results."""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from swimtracker.models.event import DEFAULT_POOL_SIZE, Distance, EventKey, PoolSize, Style
from swimtracker.models.swimmer import new_id


class TimeRecord(BaseModel):
    """A swimmer's result in one race.

    Records are immutable once created. Scores (points, fina_points) are
    computed when the record is built from a time entry and stored with it.
    Field names accept the camelCase spelling used by exported snapshots
    (swimmerId, poolSize, totalSeconds, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(default_factory=new_id)
    swimmer_id: str = Field(min_length=1)

    # Event
    distance: Distance
    style: Style
    pool_size: PoolSize = DEFAULT_POOL_SIZE

    # Result
    time: str  # [M:]SS.CC
    total_seconds: float = Field(ge=0)
    placement: int | None = Field(default=None, ge=1)
    points: int = Field(default=0, ge=0, le=20)
    fina_points: int = Field(default=0, ge=0)

    # Competition
    date: datetime.date
    competition: str = Field(min_length=1)
    competition_location: str = ""

    @field_validator("pool_size", mode="before")
    @classmethod
    def default_pool_size(cls, v: str | None) -> str:
        """Older records were stored without a pool size."""
        return v or DEFAULT_POOL_SIZE

    @field_validator("points", "fina_points", mode="before")
    @classmethod
    def default_score(cls, v: int | None) -> int:
        return v or 0

    @field_validator("competition_location", mode="before")
    @classmethod
    def default_location(cls, v: str | None) -> str:
        return v or ""

    @property
    def event_key(self) -> EventKey:
        """Grouping key for this record's event."""
        return EventKey(distance=self.distance, style=self.style, pool_size=self.pool_size)

    def __str__(self) -> str:
        return f"{self.event_key.label} {self.time}"
