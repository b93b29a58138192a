"""Pure progress analytics: aggregation, statistics and calendar views."""

from .aggregation import aggregate, summarize_sets
from .categories import CATEGORY_RULES, classify
from .distribution import PALETTE, build_distribution
from .heatmap import DEFAULT_WINDOW_DAYS, build_heat_map, intensity_for
from .keys import KeyResolver
from .pr_timeline import SIGNIFICANT_PR_MIN_REPS, build_pr_timeline
from .stats import compute_stats, filter_sessions, format_date_short, get_date_cutoff

__all__ = [
    "aggregate",
    "summarize_sets",
    "CATEGORY_RULES",
    "classify",
    "PALETTE",
    "build_distribution",
    "DEFAULT_WINDOW_DAYS",
    "build_heat_map",
    "intensity_for",
    "KeyResolver",
    "SIGNIFICANT_PR_MIN_REPS",
    "build_pr_timeline",
    "compute_stats",
    "filter_sessions",
    "format_date_short",
    "get_date_cutoff",
]
