"""Gregorian calendar arithmetic: day boundaries, week alignment, grid rows.

Leap years and month lengths come from the standard ``calendar`` module and
dense day sequences from pandas, so no modular arithmetic is hand-rolled here.
"""

from __future__ import annotations

import calendar
import math
from datetime import date, datetime, time, timedelta

import pandas as pd

DAYS_PER_WEEK = 7


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def to_day(value: date | datetime) -> date:
    """Truncate an instant to its calendar day (timezone-naive)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    """Last whole second of *day* (23:59:59)."""
    return datetime.combine(day, time(23, 59, 59))


def monday_of_week(day: date) -> date:
    """Most recent Monday on or before *day*."""
    return day - timedelta(days=day.weekday())


def monday_aligned_rows(first_day: date, day_count: int) -> int:
    """Number of Mon–Sun rows needed to lay out *day_count* days from *first_day*.

    The first row is padded with the weekdays preceding *first_day*.
    """
    if day_count <= 0:
        return 0
    return math.ceil((first_day.weekday() + day_count) / DAYS_PER_WEEK)


def month_rows(year: int, month: int) -> int:
    """Monday-aligned week rows covering every day of a month (4–6)."""
    return monday_aligned_rows(date(year, month, 1), days_in_month(year, month))


def year_rows(year: int) -> int:
    """Monday-aligned week rows spanning Jan 1 to Dec 31."""
    return monday_aligned_rows(date(year, 1, 1), days_in_year(year))


def date_sequence(start: date, end: date) -> list[date]:
    """Every calendar day from *start* to *end*, inclusive, ascending."""
    if end < start:
        return []
    return [ts.date() for ts in pd.date_range(start=start, end=end, freq="D")]


def year_days(year: int) -> list[date]:
    """Every calendar day of *year* — 366 entries in a leap year, else 365."""
    return date_sequence(date(year, 1, 1), date(year, 12, 31))
