# storerota/allocator - Greedy multi-location shift allocation
from .coverage import coverage_summary, coverage_table, shortfalls
from .engine import allocate
from .stats import RosterStats, aggregate_stats, roster_stats

__all__ = [
    "allocate",
    "roster_stats",
    "aggregate_stats",
    "RosterStats",
    "coverage_table",
    "coverage_summary",
    "shortfalls",
]
