"""Streak detection over sparse daily activity.

A streak is a maximal run of calendar-consecutive active days. Days are
converted to proleptic ordinals so a run is simply a stretch where successive
ordinals differ by exactly one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class StreakRun:
    """One maximal run of consecutive active days (both ends inclusive)."""

    start: date
    end: date

    @property
    def length(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class StreakStats:
    current: int = 0
    longest: int = 0


def find_runs(active_days: Iterable[date]) -> tuple[StreakRun, ...]:
    """Split the distinct active days into ascending consecutive runs."""
    ordinals = np.unique(np.fromiter((d.toordinal() for d in active_days), dtype=np.int64))
    if ordinals.size == 0:
        return ()

    # Index of the last day of every run except the final one
    breaks = np.flatnonzero(np.diff(ordinals) != 1)
    starts = np.concatenate(([0], breaks + 1))
    ends = np.concatenate((breaks, [ordinals.size - 1]))

    return tuple(
        StreakRun(
            start=date.fromordinal(int(ordinals[s])),
            end=date.fromordinal(int(ordinals[e])),
        )
        for s, e in zip(starts, ends)
    )


def longest_streak(runs: tuple[StreakRun, ...]) -> int:
    return max((run.length for run in runs), default=0)


def current_streak(runs: tuple[StreakRun, ...], today: date) -> int:
    """Length of the run that is still live as of *today*.

    A run is live if it contains today, or if it ended yesterday (a rest day
    today has not broken it yet). Otherwise the current streak is 0.
    """
    yesterday = today - timedelta(days=1)
    for run in runs:
        if run.contains(today):
            return run.length
    for run in runs:
        if run.end == yesterday:
            return run.length
    return 0


def calculate_streaks(active_days: Iterable[date], today: date) -> StreakStats:
    """Current and longest streaks for a set of days with non-zero activity.

    Args:
        active_days: Calendar days with activity; order and duplicates don't matter.
        today: The caller's notion of today.

    Returns:
        StreakStats with both lengths in days.
    """
    runs = find_runs(active_days)
    return StreakStats(
        current=current_streak(runs, today),
        longest=longest_streak(runs),
    )
