"""Days of the week and their classification.

Order is fixed by declaration: MONDAY=0 ... SUNDAY=6. Classification is a
range check on that ordinal, never on a real calendar.
"""

from __future__ import annotations

from enum import Enum


class Day(int, Enum):
    """Closed, ordered set of weekdays."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, name: str) -> "Day":
        """Resolve a case-insensitive day name (`"monday"`, `"Sunday"`)."""

        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown day: {name!r}") from None


class DayType(str, Enum):
    """Result of classifying a `Day`; compares equal to its plain string."""

    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"
