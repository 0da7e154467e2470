"""Tests for the swimmer dashboard summary."""

from datetime import date

from swimtracker.models import Distance, Style
from swimtracker.services import build_profile, recent_times, swimmer_times, total_points


class TestProfileHelpers:
    """Tests for the small per-swimmer helpers."""

    def test_swimmer_times(self, make_record):
        """Only the swimmer's own records are returned, in order."""
        records = [
            make_record(id="1", swimmer_id="alice"),
            make_record(id="2", swimmer_id="bob"),
            make_record(id="3", swimmer_id="alice"),
        ]
        assert [r.id for r in swimmer_times("alice", records)] == ["1", "3"]

    def test_total_points(self, make_record):
        """Placement points add up."""
        assert total_points([make_record(placement=1), make_record(placement=5)]) == 36
        assert total_points([]) == 0

    def test_recent_times_limit_and_order(self, make_record):
        """Newest first, capped at the limit."""
        records = [make_record(id=str(day), race_date=date(2024, 1, day)) for day in range(1, 16)]
        recent = recent_times(records, limit=10)
        assert len(recent) == 10
        assert recent[0].id == "15"
        assert recent[-1].id == "6"

    def test_recent_times_same_date_keeps_order(self, make_record):
        """Races on the same day keep input order."""
        records = [make_record(id="a"), make_record(id="b")]
        assert [r.id for r in recent_times(records)] == ["a", "b"]


class TestBuildProfile:
    """Tests for the full profile."""

    def test_profile(self, make_record, alice):
        """Totals, bests, recent races and competitions for one swimmer."""
        records = [
            make_record(id="1", swimmer_id="alice", total_seconds=62.0, placement=2,
                        competition="Spring", race_date=date(2024, 3, 1)),
            make_record(id="2", swimmer_id="alice", total_seconds=60.0, placement=1,
                        competition="Summer", race_date=date(2024, 7, 1)),
            make_record(id="3", swimmer_id="alice", style=Style.BUTTERFLY, distance=Distance.M50,
                        total_seconds=30.0, placement=4, competition="Summer",
                        race_date=date(2024, 7, 2)),
            make_record(id="4", swimmer_id="bob", total_seconds=55.0, placement=1),
        ]
        profile = build_profile(alice, records, recent_limit=2)

        assert profile.swimmer == alice
        assert profile.race_count == 3
        assert profile.total_points == 19 + 20 + 17
        # Event order: Freestyle before Butterfly
        assert [r.id for r in profile.personal_bests] == ["2", "3"]
        assert [r.id for r in profile.recent] == ["3", "2"]
        assert [(c.name, c.events, c.points) for c in profile.competitions] == [
            ("Summer", 2, 37),
            ("Spring", 1, 19),
        ]

    def test_empty_profile(self, alice):
        """A swimmer without races has an empty profile."""
        profile = build_profile(alice, [])
        assert profile.race_count == 0
        assert profile.personal_bests == []
        assert profile.recent == []
        assert profile.competitions == []
