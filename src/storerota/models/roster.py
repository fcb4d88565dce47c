"""Roster shapes: who works where, per day and slot."""
from typing import Any, Dict, List, Mapping

import pandas as pd

from .availability import empty_grid
from .shift import ALL_DAYS, SLOT_ORDER, Day, SlotType, iter_slots, normalize_day

# {day: {slot: [worker names]}} for one location
Roster = Dict[Day, Dict[SlotType, List[str]]]

# {location id: Roster}, in location priority order
MultiLocationRoster = Dict[str, Roster]

ROSTER_COLUMNS = ["location", "day", "slot", "position", "worker"]


def empty_roster() -> Roster:
    """A roster with no one assigned anywhere."""
    return empty_grid()


def assigned_workers(roster: Roster, day: Day, slot: SlotType) -> List[str]:
    """Workers assigned to a slot; an absent entry means nobody."""
    return list((roster.get(day) or {}).get(slot) or [])


def roster_to_dict(multi: MultiLocationRoster) -> Dict[str, Dict[str, Dict[str, List[str]]]]:
    """Convert to plain string keys (JSON hand-off)."""
    return {
        location: {
            day.value: {slot.value: assigned_workers(roster, day, slot) for slot in SLOT_ORDER}
            for day in ALL_DAYS
        }
        for location, roster in multi.items()
    }


def roster_from_dict(data: Mapping[str, Mapping[Any, Mapping[Any, List[str]]]]) -> MultiLocationRoster:
    """Inverse of roster_to_dict; accepts any day/slot labels."""
    multi: MultiLocationRoster = {}
    for location, days in data.items():
        roster = empty_roster()
        for day_key, slots in days.items():
            day = normalize_day(day_key)
            for slot_key, names in slots.items():
                roster[day][SlotType.from_string(slot_key)] = list(names or [])
        multi[location] = roster
    return multi


def roster_to_dataframe(multi: MultiLocationRoster) -> pd.DataFrame:
    """One row per assigned worker: location, day, slot, position, worker."""
    rows = [
        {
            "location": location,
            "day": day.value,
            "slot": slot.value,
            "position": pos,
            "worker": name,
        }
        for location, roster in multi.items()
        for day, slot in iter_slots()
        for pos, name in enumerate(assigned_workers(roster, day, slot), start=1)
    ]
    if not rows:
        return pd.DataFrame(columns=ROSTER_COLUMNS)
    return pd.DataFrame(rows, columns=ROSTER_COLUMNS)
