"""Placement points and approximate FINA-style points for a race result.

FINA-style points use the cubic formula

    points = floor(1000 * (base_time / time) ** 3)

against a small table of long-course men's world record times. Only the
classic Olympic pool events have a base time; everything else (non-Olympic
distances, open water) scores 0. Short-course results are scored against
the same long-course table, so 25m scores are an approximation only.
"""

import math
from collections.abc import Mapping
from types import MappingProxyType

from swimtracker.models.event import Distance, PoolSize, Style

# Points for 1st place; each later place scores one less, never below zero
FIRST_PLACE_POINTS = 20
UNPLACED = FIRST_PLACE_POINTS + 1


def _validate_base_times(
    table: dict[tuple[Style, Distance], float],
) -> Mapping[tuple[Style, Distance], float]:
    """Freeze the base time table, rejecting non-positive entries."""
    for (style, distance), seconds in table.items():
        if seconds <= 0:
            raise ValueError(f"Base time for {distance} {style} must be positive, got {seconds}")
    return MappingProxyType(table)


# (style, distance) -> base time in seconds (men's LCM reference)
BASE_TIMES: Mapping[tuple[Style, Distance], float] = _validate_base_times(
    {
        (Style.FREESTYLE, Distance.M50): 20.91,
        (Style.FREESTYLE, Distance.M100): 46.80,
        (Style.FREESTYLE, Distance.M200): 102.00,
        (Style.FREESTYLE, Distance.M400): 220.07,
        (Style.FREESTYLE, Distance.M800): 452.12,
        (Style.FREESTYLE, Distance.M1500): 871.02,
        (Style.BACKSTROKE, Distance.M50): 23.55,
        (Style.BACKSTROKE, Distance.M100): 51.60,
        (Style.BACKSTROKE, Distance.M200): 111.92,
        (Style.BREASTSTROKE, Distance.M50): 25.95,
        (Style.BREASTSTROKE, Distance.M100): 56.88,
        (Style.BREASTSTROKE, Distance.M200): 125.48,
        (Style.BUTTERFLY, Distance.M50): 22.27,
        (Style.BUTTERFLY, Distance.M100): 49.45,
        (Style.BUTTERFLY, Distance.M200): 110.34,
        (Style.MEDLEY, Distance.M200): 114.00,
        (Style.MEDLEY, Distance.M400): 242.50,
    }
)


def compute_placement_points(placement: int | None) -> int:
    """Points for a finishing position: 1st = 20, 2nd = 19, ... 21st and later = 0.

    A missing placement scores as unplaced.
    """
    if placement is None:
        placement = UNPLACED
    return max(0, UNPLACED - placement)


def get_base_time(style: Style, distance: Distance) -> float | None:
    """Reference time for an event, or None if the event is not scored."""
    return BASE_TIMES.get((Style(style), Distance(distance)))


def compute_standardized_points(
    total_seconds: float,
    style: Style,
    distance: Distance,
    pool_size: PoolSize,
) -> int:
    """Approximate FINA-style points for a swim.

    Args:
        total_seconds: Race time in seconds
        style: Swimming style
        distance: Race distance
        pool_size: Pool the race was swum in

    Returns:
        floor(1000 * (base / total_seconds) ** 3), or 0 for open water,
        events without a base time, or a non-positive time
    """
    if pool_size == PoolSize.OPEN_WATER:
        return 0

    base_time = get_base_time(style, distance)
    if base_time is None or total_seconds <= 0:
        return 0

    return math.floor(1000 * (base_time / total_seconds) ** 3)
