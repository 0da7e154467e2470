"""Tests for best times, competition totals and the grouping helper."""

from datetime import date

from swimtracker.models import Distance, EventKey, PoolSize, Style
from swimtracker.services import (
    aggregate_by_competition,
    group_reduce,
    index_best_times,
    is_personal_best,
)

FREE_100_LCM = EventKey(Distance.M100, Style.FREESTYLE, PoolSize.LONG_COURSE)


class TestGroupReduce:
    """Tests for the generic grouping helper."""

    def test_groups_in_first_seen_order(self):
        """Groups appear in the order their first item was seen."""
        result = group_reduce(
            ["bb", "a", "cc", "d", "eee"],
            key=len,
            initial=lambda s: [s],
            merge=lambda acc, s: acc + [s],
        )
        assert list(result) == [2, 1, 3]
        assert result[2] == ["bb", "cc"]
        assert result[1] == ["a", "d"]

    def test_empty(self):
        """No items, no groups."""
        assert group_reduce([], key=len, initial=lambda s: s, merge=lambda a, s: a) == {}


class TestIndexBestTimes:
    """Tests for personal best lookup."""

    def test_fastest_wins(self, make_record):
        """The lower total_seconds is the best."""
        slow = make_record(id="slow", total_seconds=62.0)
        fast = make_record(id="fast", total_seconds=60.5)
        bests = index_best_times([slow, fast])
        assert bests[FREE_100_LCM].id == "fast"

    def test_tie_keeps_first_seen(self, make_record):
        """An equal time does not replace the earlier best."""
        records = [
            make_record(id="slow", total_seconds=62.0),
            make_record(id="fast", total_seconds=60.5),
            make_record(id="tie", total_seconds=60.5),
        ]
        assert index_best_times(records)[FREE_100_LCM].id == "fast"

    def test_pool_sizes_kept_apart(self, make_record):
        """Short course and long course bests are separate."""
        records = [
            make_record(id="lcm", total_seconds=60.0),
            make_record(id="scm", total_seconds=58.0, pool_size=PoolSize.SHORT_COURSE),
        ]
        bests = index_best_times(records)
        assert len(bests) == 2
        assert bests[FREE_100_LCM].id == "lcm"
        assert bests[EventKey(Distance.M100, Style.FREESTYLE, PoolSize.SHORT_COURSE)].id == "scm"

    def test_empty(self):
        """No records, no bests."""
        assert index_best_times([]) == {}

    def test_is_personal_best(self, make_record):
        """Only the winning record is flagged, compared by id."""
        slow = make_record(id="slow", total_seconds=62.0)
        fast = make_record(id="fast", total_seconds=60.5)
        bests = index_best_times([slow, fast])
        assert is_personal_best(fast, bests)
        assert not is_personal_best(slow, bests)
        assert not is_personal_best(make_record(id="other", style=Style.BUTTERFLY), bests)

    def test_idempotent(self, make_record):
        """Indexing twice gives the same answer."""
        records = [make_record(total_seconds=s) for s in (61.0, 59.0, 63.0)]
        assert index_best_times(records) == index_best_times(records)


class TestAggregateByCompetition:
    """Tests for per-competition totals."""

    def test_merges_same_name(self, make_record):
        """Two races at one competition give one summary with the later date."""
        records = [
            make_record(competition="A", placement=11, race_date=date(2024, 1, 1)),
            make_record(competition="A", placement=16, race_date=date(2024, 1, 2)),
        ]
        [summary] = aggregate_by_competition(records)
        assert summary.name == "A"
        assert summary.points == 15
        assert summary.events == 2
        assert summary.date == date(2024, 1, 2)

    def test_location_follows_latest_date(self, make_record):
        """The location of the most recent race is kept."""
        records = [
            make_record(competition="A", race_date=date(2024, 3, 1), competition_location="Leeds"),
            make_record(competition="A", race_date=date(2024, 3, 5), competition_location="York"),
            make_record(competition="A", race_date=date(2024, 3, 2), competition_location="Hull"),
        ]
        [summary] = aggregate_by_competition(records)
        assert summary.location == "York"
        assert summary.date == date(2024, 3, 5)

    def test_same_date_keeps_first_location(self, make_record):
        """A race on the same date does not change the location."""
        records = [
            make_record(competition="A", competition_location="Leeds"),
            make_record(competition="A", competition_location="York"),
        ]
        assert aggregate_by_competition(records)[0].location == "Leeds"

    def test_sorted_most_recent_first(self, make_record):
        """Competitions are listed by date, newest first."""
        records = [
            make_record(competition="Old", race_date=date(2023, 5, 1)),
            make_record(competition="New", race_date=date(2024, 5, 1)),
            make_record(competition="Mid", race_date=date(2023, 11, 1)),
        ]
        assert [s.name for s in aggregate_by_competition(records)] == ["New", "Mid", "Old"]

    def test_name_match_is_exact(self, make_record):
        """Names differing in case are separate competitions."""
        records = [make_record(competition="Open"), make_record(competition="open")]
        assert len(aggregate_by_competition(records)) == 2

    def test_empty(self):
        """No records, no competitions."""
        assert aggregate_by_competition([]) == []

    def test_idempotent(self, make_record):
        """Aggregating twice gives the same summaries."""
        records = [
            make_record(competition="A", race_date=date(2024, 3, 1), competition_location="Leeds"),
            make_record(competition="B", race_date=date(2024, 4, 1)),
            make_record(competition="A", race_date=date(2024, 3, 5), competition_location="York"),
        ]
        assert aggregate_by_competition(records) == aggregate_by_competition(records)
