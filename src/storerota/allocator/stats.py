"""
Roster Statistics
=================
Fill counts for one location's roster or for all locations together.
Used by the CLI, the coverage table and any caller reporting fill rates.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional

from storerota.models.roster import MultiLocationRoster, Roster, assigned_workers
from storerota.models.rules import SLOT_CAPACITY
from storerota.models.shift import SlotType, iter_slots
from storerota.utils.logging_setup import get_logger

logger = get_logger("storerota.allocator.stats")


@dataclass
class RosterStats:
    """Assignment totals for one or more rosters."""
    per_worker_count: Dict[str, int] = field(default_factory=dict)
    total_assigned: int = 0
    total_required: int = 0
    fill_rate: float = 0.0  # percent of required positions filled

    @property
    def shortfall(self) -> int:
        """Positions left unfilled."""
        return max(0, self.total_required - self.total_assigned)

    def to_dict(self) -> Dict:
        return {
            "per_worker_count": dict(self.per_worker_count),
            "total_assigned": self.total_assigned,
            "total_required": self.total_required,
            "fill_rate": self.fill_rate,
        }


def _collect(rosters: Iterable[Roster], capacity: Mapping[SlotType, int]) -> RosterStats:
    counts: Dict[str, int] = {}
    assigned = 0
    required = 0
    for roster in rosters:
        for day, slot in iter_slots():
            names = assigned_workers(roster, day, slot)
            required += capacity[slot]
            assigned += len(names)
            for name in names:
                counts[name] = counts.get(name, 0) + 1

    fill_rate = 100 * assigned / required if required > 0 else 0.0
    return RosterStats(
        per_worker_count=counts,
        total_assigned=assigned,
        total_required=required,
        fill_rate=fill_rate,
    )


def roster_stats(roster: Roster, capacity: Optional[Mapping[SlotType, int]] = None) -> RosterStats:
    """
    Statistics for a single location's weekly roster.

    Every (day, slot) counts toward `total_required`, filled or not.
    """
    return _collect([roster], SLOT_CAPACITY if capacity is None else capacity)


def aggregate_stats(
    multi: MultiLocationRoster,
    capacity: Optional[Mapping[SlotType, int]] = None,
) -> RosterStats:
    """Statistics summed over every location's roster."""
    stats = _collect(multi.values(), SLOT_CAPACITY if capacity is None else capacity)
    logger.debug(
        f"Aggregate over {len(multi)} locations: "
        f"{stats.total_assigned}/{stats.total_required} ({stats.fill_rate:.0f}%)"
    )
    return stats
