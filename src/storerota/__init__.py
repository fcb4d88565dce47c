"""
Store Rota
==========
Greedy weekly shift allocation across several store locations, with
fill-rate statistics, coverage reporting and payroll.
"""
from storerota.allocator import aggregate_stats, allocate, roster_stats
from storerota.models import Availability, Day, SlotType

__version__ = "1.0.0"

__all__ = [
    "allocate",
    "roster_stats",
    "aggregate_stats",
    "Availability",
    "Day",
    "SlotType",
]
