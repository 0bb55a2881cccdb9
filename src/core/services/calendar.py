"""Weekday/weekend classification."""

from __future__ import annotations

from core.domain.calendar import Day, DayType


def get_day_type(day: Day) -> DayType:
    if Day.MONDAY <= day <= Day.FRIDAY:
        return DayType.WEEKDAY
    return DayType.WEEKEND
