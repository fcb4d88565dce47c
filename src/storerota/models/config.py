"""Allocator configuration."""
from dataclasses import dataclass, field
from typing import Dict, Mapping

from .rules import DEFAULT_BASE_RATE, SLOT_CAPACITY, SLOT_HOURS
from .shift import SlotType


def _slot_keyed(values: Mapping) -> Dict[SlotType, int]:
    return {SlotType.from_string(k): int(v) for k, v in values.items()}


@dataclass
class AllocatorConfig:
    """Configuration shared by the allocator, statistics and payroll."""

    # Workers required per slot type (same for every day and location)
    capacity: Dict[SlotType, int] = field(default_factory=lambda: dict(SLOT_CAPACITY))

    # Paid hours per slot type
    slot_hours: Dict[SlotType, int] = field(default_factory=lambda: dict(SLOT_HOURS))

    # Hourly pay before the per-worker coefficient
    base_rate: float = DEFAULT_BASE_RATE

    def __post_init__(self):
        self.capacity = _slot_keyed(self.capacity)
        self.slot_hours = _slot_keyed(self.slot_hours)
        self.base_rate = float(self.base_rate)

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "capacity": {s.value: n for s, n in self.capacity.items()},
            "slot_hours": {s.value: h for s, h in self.slot_hours.items()},
            "base_rate": self.base_rate,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "AllocatorConfig":
        """Create from dictionary; missing keys keep their defaults."""
        cfg = cls()
        if d.get("capacity"):
            cfg.capacity = {**cfg.capacity, **_slot_keyed(d["capacity"])}
        if d.get("slot_hours"):
            cfg.slot_hours = {**cfg.slot_hours, **_slot_keyed(d["slot_hours"])}
        if d.get("base_rate") is not None:
            cfg.base_rate = float(d["base_rate"])
        return cfg
