"""
Weekly Payroll
==============
Hours and pay per worker from an allocated multi-location roster.

A worker's hours are the summed hours of every slot their name occupies,
at any location. Pay is hours × base rate × the worker's coefficient.
"""
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from storerota.models.roster import MultiLocationRoster, assigned_workers
from storerota.models.rules import SLOT_HOURS
from storerota.models.shift import SlotType, iter_slots
from storerota.models.worker import Worker
from storerota.utils.logging_setup import get_logger

logger = get_logger("storerota.payroll")

PAYROLL_COLUMNS = ["id", "name", "salary_coefficient", "shifts", "hours", "salary"]


@dataclass
class PayrollLine:
    """Pay for a single worker."""
    id: str
    name: str
    salary_coefficient: float
    shifts: int
    hours: float
    salary: float


def hours_by_worker(
    multi: MultiLocationRoster,
    slot_hours: Optional[Mapping[SlotType, float]] = None,
) -> Dict[str, float]:
    """Total hours per worker name across all locations."""
    slot_hours = SLOT_HOURS if slot_hours is None else slot_hours
    hours: Dict[str, float] = {}
    for roster in multi.values():
        for day, slot in iter_slots():
            for name in assigned_workers(roster, day, slot):
                hours[name] = hours.get(name, 0) + slot_hours.get(slot, 0)
    return hours


def calculate_payroll(
    workers: Sequence[Worker],
    multi: MultiLocationRoster,
    base_rate: float,
    slot_hours: Optional[Mapping[SlotType, float]] = None,
) -> List[PayrollLine]:
    """
    Pay every worker record for the week.

    Args:
        workers: Worker records; matched to the roster by display name
        multi: Allocated roster for all locations
        base_rate: Pay per hour before the worker's coefficient
        slot_hours: Hours per slot type (defaults to SLOT_HOURS)

    Returns:
        One PayrollLine per worker, highest salary first
    """
    slot_hours = SLOT_HOURS if slot_hours is None else slot_hours
    hours = hours_by_worker(multi, slot_hours)
    shifts: Dict[str, int] = {}
    for roster in multi.values():
        for day, slot in iter_slots():
            for name in assigned_workers(roster, day, slot):
                shifts[name] = shifts.get(name, 0) + 1

    lines = []
    for w in workers:
        h = hours.get(w.name, 0)
        lines.append(PayrollLine(
            id=w.id,
            name=w.name,
            salary_coefficient=w.salary_coefficient,
            shifts=shifts.get(w.name, 0),
            hours=h,
            salary=h * float(base_rate) * w.salary_coefficient,
        ))

    unknown = set(hours) - {w.name for w in workers}
    if unknown:
        logger.warning(f"Rostered names without a worker record: {', '.join(sorted(unknown))}")

    lines.sort(key=lambda line: line.salary, reverse=True)
    logger.debug(f"Payroll for {len(lines)} workers, total {payroll_total(lines):.2f}")
    return lines


def payroll_total(lines: Sequence[PayrollLine]) -> float:
    """Sum of all salaries."""
    return sum(line.salary for line in lines)


def payroll_to_dataframe(lines: Sequence[PayrollLine]) -> pd.DataFrame:
    """Tabular view of payroll lines."""
    if not lines:
        return pd.DataFrame(columns=PAYROLL_COLUMNS)
    return pd.DataFrame(
        [
            {
                "id": line.id,
                "name": line.name,
                "salary_coefficient": line.salary_coefficient,
                "shifts": line.shifts,
                "hours": line.hours,
                "salary": line.salary,
            }
            for line in lines
        ],
        columns=PAYROLL_COLUMNS,
    )
