"""Find the weekdays that occur most often in a year."""

from __future__ import annotations

import calendar

_DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_SUNDAY = 0


def _new_year_weekday(year: int) -> int:
    """Weekday of 1 January in the proleptic Gregorian calendar, 0 being Sunday."""
    prior = year - 1
    return (1 + 5 * (prior % 4) + 4 * (prior % 100) + 6 * (prior % 400)) % 7


def most_frequent_days(year: int) -> list[str]:
    """Return the names of the most frequent weekdays of ``year``, Monday first, Sunday last."""
    first = _new_year_weekday(year)
    last = (first + (1 if calendar.isleap(year) else 0)) % 7
    if first == last:
        return [_DAY_NAMES[first]]
    if first == _SUNDAY:
        first, last = last, first
    return [_DAY_NAMES[first], _DAY_NAMES[last]]