"""Per-slot coverage: required vs assigned for every location, day and slot."""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import pandas as pd

from storerota.models.roster import MultiLocationRoster, assigned_workers
from storerota.models.rules import SLOT_CAPACITY
from storerota.models.shift import SlotType, iter_slots

COVERAGE_COLUMNS = ["location", "day", "slot", "time", "assigned", "required", "gap", "workers"]


def coverage_table(
    multi: MultiLocationRoster,
    capacity: Optional[Mapping[SlotType, int]] = None,
) -> pd.DataFrame:
    """Table: location, day, slot, time, assigned, required, gap, workers.

    gap = assigned - required, so under-filled slots are negative.
    """
    capacity = SLOT_CAPACITY if capacity is None else capacity
    rows = []
    for location, roster in multi.items():
        for day, slot in iter_slots():
            names = assigned_workers(roster, day, slot)
            rows.append({
                "location": location,
                "day": day.value,
                "slot": slot.value,
                "time": slot.time_range,
                "assigned": len(names),
                "required": int(capacity[slot]),
                "gap": len(names) - int(capacity[slot]),
                "workers": ", ".join(names),
            })
    if not rows:
        return pd.DataFrame(columns=COVERAGE_COLUMNS)
    return pd.DataFrame(rows, columns=COVERAGE_COLUMNS)


def coverage_summary(cov: pd.DataFrame) -> Dict[str, int]:
    """Counts of full, short and empty slots plus the total deficit."""
    if cov is None or cov.empty:
        return {"cells": 0, "full": 0, "short": 0, "empty": 0, "deficit_total": 0}
    full = int((cov["gap"] >= 0).sum())
    short = int((cov["gap"] < 0).sum())
    empty = int((cov["assigned"] == 0).sum())
    deficit = int((cov["required"] - cov["assigned"]).clip(lower=0).sum())
    return {"cells": int(len(cov)), "full": full, "short": short, "empty": empty, "deficit_total": deficit}


def shortfalls(
    multi: MultiLocationRoster,
    capacity: Optional[Mapping[SlotType, int]] = None,
) -> List[Dict]:
    """Under-filled slots, in location then canonical slot order."""
    cov = coverage_table(multi, capacity)
    if cov.empty:
        return []
    short = cov[cov["gap"] < 0]
    return [
        {
            "location": r["location"],
            "day": r["day"],
            "slot": r["slot"],
            "assigned": int(r["assigned"]),
            "required": int(r["required"]),
        }
        for _, r in short.iterrows()
    ]
