"""Tests for placement points and FINA-style points."""

import pytest

from swimtracker.models import Distance, PoolSize, Style
from swimtracker.services import (
    BASE_TIMES,
    compute_placement_points,
    compute_standardized_points,
)
from swimtracker.services.scoring import _validate_base_times, get_base_time


class TestPlacementPoints:
    """Tests for placement points."""

    def test_first_place(self):
        """1st place scores 20."""
        assert compute_placement_points(1) == 20

    def test_formula(self):
        """Points are max(0, 21 - placement) for every placement."""
        for placement in range(1, 40):
            assert compute_placement_points(placement) == max(0, 21 - placement)

    def test_floor_at_zero(self):
        """21st and later score 0."""
        assert compute_placement_points(20) == 1
        assert compute_placement_points(21) == 0
        assert compute_placement_points(25) == 0

    def test_missing_placement(self):
        """A missing placement scores as unplaced."""
        assert compute_placement_points(None) == 0


class TestStandardizedPoints:
    """Tests for FINA-style points."""

    def test_base_time_scores_1000(self):
        """Swimming the base time scores exactly 1000."""
        assert compute_standardized_points(46.80, Style.FREESTYLE, Distance.M100, PoolSize.LONG_COURSE) == 1000

    def test_decreasing_with_slower_times(self):
        """Slower times score strictly less."""
        scores = [
            compute_standardized_points(t, Style.FREESTYLE, Distance.M100, PoolSize.LONG_COURSE)
            for t in (46.80, 48.00, 50.00, 55.00, 60.00, 75.00)
        ]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == len(scores)

    def test_cubic_formula(self):
        """Points are floor(1000 * (base / time) ** 3)."""
        # (46.80 / 60.00) ** 3 * 1000 = 474.552
        assert compute_standardized_points(60.0, Style.FREESTYLE, Distance.M100, PoolSize.LONG_COURSE) == 474

    def test_accepts_plain_strings(self):
        """Enum values given as strings score the same."""
        assert compute_standardized_points(46.80, "Freestyle", "100m", "50m") == 1000

    @pytest.mark.parametrize("seconds", [20.0, 46.80, 120.0])
    def test_open_water_scores_zero(self, seconds):
        """Open water never scores."""
        assert compute_standardized_points(seconds, Style.FREESTYLE, Distance.M100, PoolSize.OPEN_WATER) == 0

    def test_short_course_uses_same_table(self):
        """25m pools are scored against the long-course base times."""
        long_course = compute_standardized_points(55.0, Style.BACKSTROKE, Distance.M100, PoolSize.LONG_COURSE)
        short_course = compute_standardized_points(55.0, Style.BACKSTROKE, Distance.M100, PoolSize.SHORT_COURSE)
        assert short_course == long_course > 0

    @pytest.mark.parametrize(
        "style,distance",
        [
            (Style.MEDLEY, Distance.M100),
            (Style.BUTTERFLY, Distance.M400),
            (Style.FREESTYLE, Distance.M500),
            (Style.FREESTYLE, Distance.KM5),
        ],
    )
    def test_events_without_base_time(self, style, distance):
        """Events without a base time score 0."""
        assert compute_standardized_points(100.0, style, distance, PoolSize.LONG_COURSE) == 0

    def test_non_positive_time(self):
        """Zero or negative times score 0."""
        assert compute_standardized_points(0, Style.FREESTYLE, Distance.M100, PoolSize.LONG_COURSE) == 0
        assert compute_standardized_points(-5, Style.FREESTYLE, Distance.M100, PoolSize.LONG_COURSE) == 0


class TestBaseTimes:
    """Tests for the base time table."""

    def test_all_positive(self):
        """Every base time is positive."""
        assert all(seconds > 0 for seconds in BASE_TIMES.values())

    def test_covered_events(self):
        """Only the Olympic pool events have base times."""
        expected = {
            Style.FREESTYLE: {"50m", "100m", "200m", "400m", "800m", "1500m"},
            Style.BACKSTROKE: {"50m", "100m", "200m"},
            Style.BREASTSTROKE: {"50m", "100m", "200m"},
            Style.BUTTERFLY: {"50m", "100m", "200m"},
            Style.MEDLEY: {"200m", "400m"},
        }
        actual: dict = {}
        for style, distance in BASE_TIMES:
            actual.setdefault(style, set()).add(distance.value)
        assert actual == expected

    def test_known_values(self):
        """Spot check reference times."""
        assert get_base_time(Style.FREESTYLE, Distance.M100) == 46.80
        assert get_base_time(Style.MEDLEY, Distance.M400) == 242.50
        assert get_base_time(Style.MEDLEY, Distance.M50) is None

    def test_read_only(self):
        """The table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            BASE_TIMES[(Style.MEDLEY, Distance.M100)] = 55.0  # type: ignore[index]

    def test_non_positive_entries_rejected(self):
        """A zero or negative base time fails validation."""
        with pytest.raises(ValueError, match="must be positive"):
            _validate_base_times({(Style.FREESTYLE, Distance.M50): 0.0})
