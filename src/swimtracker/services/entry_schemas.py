"""Pydantic schemas and errors for entering race results."""

import datetime

from pydantic import BaseModel, Field

from swimtracker.models.event import DEFAULT_POOL_SIZE, Distance, PoolSize, Style


class FieldError(BaseModel):
    """A single problem with one input field."""

    field: str
    message: str


class ValidationError(ValueError):
    """Raised when a time entry cannot become a TimeRecord.

    Carries every field problem found, not only the first.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field=field, message=message)])

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed."""
        return [e.field for e in self.errors]


class RaceTime(BaseModel):
    """A race time as shown to the user and as a comparable number."""

    display: str  # [M:]SS.CC
    total_seconds: float


class TimeEntry(BaseModel):
    """Raw input for logging a race result.

    Time parts and text fields are left unchecked here so that every
    problem can be reported together when the record is built.
    """

    swimmer_id: str = ""
    distance: Distance = Distance.M100
    style: Style = Style.FREESTYLE
    pool_size: PoolSize = DEFAULT_POOL_SIZE

    minutes: int | None = None
    seconds: int | None = None
    centiseconds: int | None = None

    placement: int = 1
    date: datetime.date = Field(default_factory=datetime.date.today)
    competition: str = ""
    competition_location: str = ""
