"""Scoring and aggregation engine.

Every function here is pure: it takes snapshots of swimmers and time
records and returns a derived view without touching any store.
"""

from swimtracker.services.best_times import index_best_times, is_personal_best
from swimtracker.services.competitions import aggregate_by_competition
from swimtracker.services.entry_schemas import (
    FieldError,
    RaceTime,
    TimeEntry,
    ValidationError,
)
from swimtracker.services.grouping import group_reduce
from swimtracker.services.head_to_head import compare_head_to_head
from swimtracker.services.leaderboard import rank_leaderboard
from swimtracker.services.profile import (
    build_profile,
    recent_times,
    swimmer_times,
    total_points,
)
from swimtracker.services.records import filter_records, group_records
from swimtracker.services.scoring import (
    BASE_TIMES,
    compute_placement_points,
    compute_standardized_points,
)
from swimtracker.services.time_converter import (
    compute_time_from_parts,
    parse_time_string,
    split_time_string,
)
from swimtracker.services.time_entry import build_time_record, validate_time_entry

__all__ = [
    "aggregate_by_competition",
    "BASE_TIMES",
    "build_profile",
    "build_time_record",
    "compare_head_to_head",
    "compute_placement_points",
    "compute_standardized_points",
    "compute_time_from_parts",
    "FieldError",
    "filter_records",
    "group_records",
    "group_reduce",
    "index_best_times",
    "is_personal_best",
    "parse_time_string",
    "RaceTime",
    "rank_leaderboard",
    "recent_times",
    "split_time_string",
    "swimmer_times",
    "TimeEntry",
    "total_points",
    "validate_time_entry",
    "ValidationError",
]
