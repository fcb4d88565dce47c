"""
Greedy Shift Allocator
======================
Turns a weekly availability table into one roster per location.

Slots are processed in calendar order (Mon..Sun, Morning..Evening). For
each slot the volunteers are ordered by how many shifts they already hold
this week, fewest first, and handed out to the locations in priority
order: each location takes a contiguous block of `capacity[slot]`
workers before the next location gets anyone.
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from storerota.models.availability import Availability
from storerota.models.roster import MultiLocationRoster, empty_roster
from storerota.models.rules import SLOT_CAPACITY
from storerota.models.shift import Day, SlotType, iter_slots
from storerota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("storerota.allocator.engine")


def _as_availability(availability: Union[Availability, Mapping, None]) -> Availability:
    if isinstance(availability, Availability):
        return availability
    return Availability.from_mapping(availability or {})


def _unique_locations(locations: Sequence[str]) -> List[str]:
    unique: List[str] = []
    for loc in locations:
        if loc in unique:
            logger.warning(f"Duplicate location {loc!r} ignored; each id is a single roster")
            continue
        unique.append(loc)
    return unique


@log_function_call
def allocate(
    availability: Union[Availability, Mapping[Any, Mapping[Any, Sequence[str]]], None],
    locations: Sequence[str],
    capacity: Optional[Mapping[SlotType, int]] = None,
) -> MultiLocationRoster:
    """
    Assign volunteers to locations for every slot of the week.

    Args:
        availability: Availability table, or a nested {day: {slot: [names]}}
            mapping with any labels accepted by Availability.from_mapping
        locations: Location ids in priority order
        capacity: Workers required per slot type (defaults to SLOT_CAPACITY)

    Returns:
        {location: {day: {slot: [names]}}} covering every day and slot
    """
    table = _as_availability(availability)
    capacity = SLOT_CAPACITY if capacity is None else capacity
    locations = _unique_locations(locations)

    rosters: MultiLocationRoster = {loc: empty_roster() for loc in locations}
    if not locations:
        logger.info("No locations given, nothing to allocate")
        return rosters

    workers = table.workers()
    # Where each worker sits per slot (None = unassigned), and their running total
    placed: Dict[str, Dict[tuple, Optional[str]]] = {
        name: {key: None for key in iter_slots()} for name in workers
    }
    shift_count: Dict[str, int] = {name: 0 for name in workers}

    logger.info(f"Allocating {len(workers)} workers across {len(locations)} locations")

    for day, slot in iter_slots():
        key = (day, slot)
        required = capacity[slot]

        pool = [name for name in table.candidates(day, slot) if placed[name][key] is None]
        # Drop repeated names so a worker fills at most one position per slot
        pool = list(dict.fromkeys(pool))
        # sorted() is stable: equal counts keep submission order
        pool = sorted(pool, key=lambda name: shift_count[name])

        idx = 0
        for loc in locations:
            block = pool[idx:idx + required]
            idx += len(block)
            for name in block:
                placed[name][key] = loc
                shift_count[name] += 1
                logger.trace(f"{loc} {day.value} {slot.value} <- {name} (now {shift_count[name]})")
            rosters[loc][day][slot] = block
            if len(block) < required:
                _log_shortfall(loc, day, slot, len(block), required)

        logger.debug(f"{day.value} {slot.value}: {idx}/{len(pool)} volunteers placed")

    total = sum(shift_count.values())
    logger.info(f"Allocation complete: {total} shifts assigned")
    return rosters


def _log_shortfall(location: str, day: Day, slot: SlotType, assigned: int, required: int) -> None:
    logger.debug(f"[short] {location} {day.value} {slot.value}: {assigned}/{required}")
