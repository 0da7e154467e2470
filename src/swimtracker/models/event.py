"""Event reference tables: distances, styles and pool sizes."""

from enum import StrEnum
from itertools import product
from typing import NamedTuple


class Distance(StrEnum):
    """Race distances, pool and open water."""

    M50 = "50m"
    M100 = "100m"
    M200 = "200m"
    M400 = "400m"
    M500 = "500m"
    M800 = "800m"
    M1500 = "1500m"
    KM1 = "1km"
    KM1_5 = "1.5km"
    KM2 = "2km"
    KM3 = "3km"
    KM5 = "5km"


class Style(StrEnum):
    """Swimming styles."""

    FREESTYLE = "Freestyle"
    BREASTSTROKE = "Breaststroke"
    BUTTERFLY = "Butterfly"
    BACKSTROKE = "Backstroke"
    MEDLEY = "Medley"


class PoolSize(StrEnum):
    """Pool sizes."""

    SHORT_COURSE = "25m"
    LONG_COURSE = "50m"
    OPEN_WATER = "Open Water"


# Legacy records carry no pool size; they were all swum long course
DEFAULT_POOL_SIZE = PoolSize.LONG_COURSE


class EventKey(NamedTuple):
    """Identifies an event for grouping: distance, style and pool size."""

    distance: Distance
    style: Style
    pool_size: PoolSize

    @property
    def label(self) -> str:
        """Display label, e.g. '200m Freestyle (50m)'."""
        return f"{self.distance.value} {self.style.value} ({self.pool_size.value})"

    def __str__(self) -> str:
        return self.label


# Every event combination, ordered style -> distance -> pool size
EVENT_COMBINATIONS: tuple[EventKey, ...] = tuple(
    EventKey(distance=distance, style=style, pool_size=pool_size)
    for style, distance, pool_size in product(Style, Distance, PoolSize)
)
