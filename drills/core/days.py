"""Day Classification — Saturday and Sunday are the weekend."""

from drills.core.domain_types import Day, DayType


WEEKEND_DAYS: frozenset[Day] = frozenset({Day.SATURDAY, Day.SUNDAY})


def get_day_type(day: Day) -> DayType:
    if Day(day) in WEEKEND_DAYS:
        return DayType.WEEKEND
    return DayType.WEEKDAY
