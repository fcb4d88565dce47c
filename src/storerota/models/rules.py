"""
Business Rules and Constants
============================
Central source of truth for slot timing, hours and staffing capacity.
"""
from dataclasses import dataclass
from typing import Dict

from .shift import SlotType


@dataclass(frozen=True)
class SlotTypeConfig:
    slot: SlotType
    label: str
    time_range: str
    hours: int
    required: int


# Slot Definitions
SLOTS: Dict[SlotType, SlotTypeConfig] = {
    SlotType.MORNING: SlotTypeConfig(SlotType.MORNING, "Morning", "6h-10h", 4, 2),
    SlotType.MIDDAY: SlotTypeConfig(SlotType.MIDDAY, "Midday", "10h-14h", 4, 1),
    SlotType.AFTERNOON: SlotTypeConfig(SlotType.AFTERNOON, "Afternoon", "14h-18h", 4, 1),
    SlotType.EVENING: SlotTypeConfig(SlotType.EVENING, "Evening", "18h-22h", 4, 1),
}

# Workers required per slot, identical for every day and location
SLOT_CAPACITY: Dict[SlotType, int] = {s: cfg.required for s, cfg in SLOTS.items()}

# Paid hours per slot
SLOT_HOURS: Dict[SlotType, int] = {s: cfg.hours for s, cfg in SLOTS.items()}

DEFAULT_BASE_RATE = 50000.0  # currency units per hour
