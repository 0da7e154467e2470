"""Shared fixtures for swimtracker tests."""

from collections.abc import Callable
from datetime import date

import pytest

from swimtracker.models import Distance, PoolSize, Style, Swimmer, TimeRecord


@pytest.fixture
def make_record() -> Callable[..., TimeRecord]:
    """Factory for TimeRecords with sensible defaults.

    Pass total_seconds and the display time is derived from it.
    """

    def _make(
        swimmer_id: str = "s1",
        distance: Distance = Distance.M100,
        style: Style = Style.FREESTYLE,
        pool_size: PoolSize = PoolSize.LONG_COURSE,
        total_seconds: float = 60.0,
        placement: int | None = 1,
        race_date: date = date(2024, 6, 1),
        competition: str = "Club Champs",
        competition_location: str = "",
        **kwargs,
    ) -> TimeRecord:
        minutes, seconds = divmod(total_seconds, 60)
        time_str = f"{int(minutes)}:{seconds:05.2f}" if minutes else f"{seconds:05.2f}"
        return TimeRecord(
            swimmer_id=swimmer_id,
            distance=distance,
            style=style,
            pool_size=pool_size,
            time=time_str,
            total_seconds=total_seconds,
            placement=placement,
            points=max(0, 21 - placement) if placement else 0,
            date=race_date,
            competition=competition,
            competition_location=competition_location,
            **kwargs,
        )

    return _make


@pytest.fixture
def alice() -> Swimmer:
    return Swimmer(id="alice", name="Alice Fast", location="Otters SC")


@pytest.fixture
def bob() -> Swimmer:
    return Swimmer(id="bob", name="Bob Steady", location="Seals")


@pytest.fixture
def carol() -> Swimmer:
    return Swimmer(id="carol", name="Carol Even")
