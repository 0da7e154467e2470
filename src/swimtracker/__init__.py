"""Swim race results tracking: personal bests, leaderboards and head-to-head comparisons."""

__version__ = "0.1.0"

from swimtracker.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from swimtracker.services import (
    aggregate_by_competition,
    build_profile,
    build_time_record,
    compare_head_to_head,
    compute_placement_points,
    compute_standardized_points,
    compute_time_from_parts,
    group_records,
    index_best_times,
    parse_time_string,
    rank_leaderboard,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Engine
    "aggregate_by_competition",
    "build_profile",
    "build_time_record",
    "compare_head_to_head",
    "compute_placement_points",
    "compute_standardized_points",
    "compute_time_from_parts",
    "group_records",
    "index_best_times",
    "parse_time_string",
    "rank_leaderboard",
]
