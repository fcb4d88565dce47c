"""Availability table: the workers who volunteered for each slot."""
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from storerota.utils.logging_setup import get_logger

from .shift import ALL_DAYS, SLOT_ORDER, Day, SlotType, iter_slots, normalize_day

logger = get_logger("storerota.models.availability")

SlotGrid = Dict[Day, Dict[SlotType, List[str]]]


def empty_grid() -> SlotGrid:
    """A 7×4 grid with an empty list in every slot."""
    return {day: {slot: [] for slot in SLOT_ORDER} for day in ALL_DAYS}


@dataclass
class Availability:
    """
    Candidate lists per (day, slot type).

    The grid is total: every day and slot type is present, absent entries
    are empty lists. List order is the allocator's tie-break.
    """

    slots: SlotGrid = field(default_factory=empty_grid)

    def __post_init__(self):
        grid = empty_grid()
        for day, slot in iter_slots():
            grid[day][slot] = list(self.slots.get(day, {}).get(slot, []))
        self.slots = grid

    def candidates(self, day: Day, slot: SlotType) -> List[str]:
        """Workers who volunteered for this slot, in submission order."""
        return list(self.slots[day][slot])

    def workers(self) -> List[str]:
        """Distinct worker names, in first-seen canonical order."""
        seen: Dict[str, None] = {}
        for day, slot in iter_slots():
            for name in self.slots[day][slot]:
                seen.setdefault(name, None)
        return list(seen)

    def without_worker(self, name: str) -> "Availability":
        """Copy of the table with every entry for `name` removed."""
        return Availability({
            day: {slot: [n for n in names if n != name] for slot, names in day_slots.items()}
            for day, day_slots in self.slots.items()
        })

    @property
    def is_empty(self) -> bool:
        return not any(self.slots[day][slot] for day, slot in iter_slots())

    def to_dict(self) -> Dict[str, Dict[str, List[str]]]:
        """Serialize with plain string keys."""
        return {
            day.value: {slot.value: list(self.slots[day][slot]) for slot in SLOT_ORDER}
            for day in ALL_DAYS
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Mapping[Any, Iterable[str]]]) -> "Availability":
        """
        Build from a nested {day: {slot: [names]}} mapping.

        Keys may be enum members or any label accepted by normalize_day /
        SlotType.from_string. Unknown keys, and values of the wrong shape
        (a day that is not a mapping, a slot that is not a list of names),
        are skipped with a warning.
        """
        table = cls()
        for day_key, day_slots in (mapping or {}).items():
            try:
                day = normalize_day(day_key)
            except ValueError:
                logger.warning(f"Skipping unknown day {day_key!r} in availability")
                continue
            if day_slots is None:
                continue
            if not isinstance(day_slots, abc.Mapping):
                logger.warning(f"Skipping {day.value}: expected a slot mapping, got {type(day_slots).__name__}")
                continue
            for slot_key, names in day_slots.items():
                try:
                    slot = SlotType.from_string(slot_key)
                except ValueError:
                    logger.warning(f"Skipping unknown slot {slot_key!r} on {day.value}")
                    continue
                if names is None:
                    continue
                if isinstance(names, (str, bytes)) or not isinstance(names, abc.Iterable):
                    logger.warning(f"Skipping {day.value} {slot.value}: expected a list of names, got {names!r}")
                    continue
                table.slots[day][slot].extend(n for n in names if n)
        return table

    @classmethod
    def from_preferences(cls, preferences: Mapping[str, Mapping[Any, Mapping[Any, bool]]]) -> "Availability":
        """
        Collapse per-worker slot flags into candidate lists.

        Args:
            preferences: {worker_name: {day: {slot: wants_slot}}}

        Workers are appended in the order the mapping yields them.
        """
        table = cls()
        for name, days in preferences.items():
            for day_key, flags in (days or {}).items():
                try:
                    day = normalize_day(day_key)
                except ValueError:
                    logger.warning(f"Skipping unknown day {day_key!r} for {name}")
                    continue
                for slot_key, wants in (flags or {}).items():
                    try:
                        slot = SlotType.from_string(slot_key)
                    except ValueError:
                        logger.warning(f"Skipping unknown slot {slot_key!r} for {name}")
                        continue
                    if wants and name not in table.slots[day][slot]:
                        table.slots[day][slot].append(name)
        logger.debug(f"Collapsed preferences of {len(preferences)} workers")
        return table
