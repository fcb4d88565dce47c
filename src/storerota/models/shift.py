"""Day and slot-type enumerations with their canonical order."""
import unicodedata
from enum import Enum
from typing import Iterator, Tuple, Union


class Day(str, Enum):
    """Days of the week, in calendar order."""
    MONDAY = "Mon"
    TUESDAY = "Tue"
    WEDNESDAY = "Wed"
    THURSDAY = "Thu"
    FRIDAY = "Fri"
    SATURDAY = "Sat"
    SUNDAY = "Sun"


class SlotType(str, Enum):
    """Daily time slots, in the order they are staffed."""
    MORNING = "Morning"      # 6h-10h
    MIDDAY = "Midday"        # 10h-14h
    AFTERNOON = "Afternoon"  # 14h-18h
    EVENING = "Evening"      # 18h-22h

    @property
    def hours(self) -> int:
        """Hours worked in this slot."""
        from .rules import SLOTS
        return SLOTS[self].hours

    @property
    def time_range(self) -> str:
        """Display time range, e.g. '6h-10h'."""
        from .rules import SLOTS
        return SLOTS[self].time_range

    @classmethod
    def from_string(cls, s: Union[str, "SlotType"]) -> "SlotType":
        """Parse a slot type from English or Vietnamese labels."""
        if isinstance(s, cls):
            return s
        key = _fold(s)
        if key in SLOT_ALIASES:
            return SLOT_ALIASES[key]
        raise ValueError(f"Unknown slot type: {s!r}")


# Canonical orders
ALL_DAYS = list(Day)
SLOT_ORDER = list(SlotType)


def _fold(s) -> str:
    return unicodedata.normalize("NFC", str(s)).strip().lower()


DAY_ALIASES = {
    "mon": Day.MONDAY, "monday": Day.MONDAY, "thứ 2": Day.MONDAY, "t2": Day.MONDAY,
    "tue": Day.TUESDAY, "tuesday": Day.TUESDAY, "thứ 3": Day.TUESDAY, "t3": Day.TUESDAY,
    "wed": Day.WEDNESDAY, "wednesday": Day.WEDNESDAY, "thứ 4": Day.WEDNESDAY, "t4": Day.WEDNESDAY,
    "thu": Day.THURSDAY, "thursday": Day.THURSDAY, "thứ 5": Day.THURSDAY, "t5": Day.THURSDAY,
    "fri": Day.FRIDAY, "friday": Day.FRIDAY, "thứ 6": Day.FRIDAY, "t6": Day.FRIDAY,
    "sat": Day.SATURDAY, "saturday": Day.SATURDAY, "thứ 7": Day.SATURDAY, "t7": Day.SATURDAY,
    "sun": Day.SUNDAY, "sunday": Day.SUNDAY, "chủ nhật": Day.SUNDAY, "cn": Day.SUNDAY,
}

SLOT_ALIASES = {
    "morning": SlotType.MORNING, "sáng": SlotType.MORNING, "m": SlotType.MORNING,
    "midday": SlotType.MIDDAY, "noon": SlotType.MIDDAY, "trưa": SlotType.MIDDAY,
    "afternoon": SlotType.AFTERNOON, "chiều": SlotType.AFTERNOON, "a": SlotType.AFTERNOON,
    "evening": SlotType.EVENING, "tối": SlotType.EVENING, "e": SlotType.EVENING,
}


def normalize_day(s: Union[str, Day]) -> Day:
    """Normalize a day label (English, short or Vietnamese) to a Day."""
    if isinstance(s, Day):
        return s
    key = _fold(s)
    if key in DAY_ALIASES:
        return DAY_ALIASES[key]
    raise ValueError(f"Unknown day: {s!r}")


def iter_slots() -> Iterator[Tuple[Day, SlotType]]:
    """Yield every (day, slot type) pair in canonical order."""
    for day in ALL_DAYS:
        for slot in SLOT_ORDER:
            yield day, slot
