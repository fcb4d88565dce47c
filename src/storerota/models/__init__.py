# storerota/models - Data models for the allocation engine
from .availability import Availability
from .config import AllocatorConfig
from .roster import MultiLocationRoster, Roster, empty_roster, roster_to_dataframe
from .rules import SLOT_CAPACITY, SLOT_HOURS, SLOTS
from .shift import ALL_DAYS, SLOT_ORDER, Day, SlotType, iter_slots, normalize_day
from .worker import DuplicateWorkerNameError, Worker, resolve_names

__all__ = [
    "Day", "SlotType", "ALL_DAYS", "SLOT_ORDER", "iter_slots", "normalize_day",
    "SLOTS", "SLOT_CAPACITY", "SLOT_HOURS",
    "AllocatorConfig",
    "Availability",
    "Roster", "MultiLocationRoster", "empty_roster", "roster_to_dataframe",
    "Worker", "DuplicateWorkerNameError", "resolve_names",
]
