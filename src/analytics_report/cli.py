"""Analytics report — prints summary, heatmap streaks and PRs for an exported history.

Usage:
    fitness-report                                  # this month, current year
    fitness-report --range last-30-days --year 2024
    fitness-report --path export.json --measure sets --records 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fitness_analytics.clock import SystemClock
from fitness_analytics.engines.service import AnalyticsService
from fitness_analytics.formatting.display import format_duration, format_number
from fitness_analytics.formatting.records import PersonalRecordFormatter
from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.enums import ActivityMeasure, HeatmapTimeframe
from fitness_analytics.models.layout import HeatmapLayoutConfig
from history_import import HistoryImportError, load_history

from analytics_report.config import HEATMAP_MEASURE, HISTORY_PATH, LOG_LEVEL, USER_ID

logger = logging.getLogger(__name__)

_RANGE_CHOICES: dict[str, HeatmapTimeframe] = {
    "this-week": HeatmapTimeframe.THIS_WEEK,
    "this-month": HeatmapTimeframe.THIS_MONTH,
    "last-30-days": HeatmapTimeframe.LAST_30_DAYS,
    "this-year": HeatmapTimeframe.THIS_YEAR,
}


def build_report(
    service: AnalyticsService,
    timeframe: HeatmapTimeframe,
    year: int,
    record_limit: int,
) -> list[str]:
    """Render the report as plain text lines."""
    date_range = DateRange.for_timeframe(timeframe, service.clock)
    stats = service.compute_key_statistics(date_range)
    analytics = service.compute_workout_analytics(date_range)
    heatmap = service.generate_heatmap(year)
    layout = HeatmapLayoutConfig.for_timeframe(timeframe, service.clock)

    lines = [
        f"{timeframe.display_name} "
        f"({date_range.start_day.isoformat()} to {date_range.end_day.isoformat()})",
        f"  Workouts:        {stats.total_workouts}",
        f"  Sets:            {stats.total_sets}",
        f"  Volume:          {format_number(stats.total_volume)}",
        f"  Duration:        {format_duration(analytics.total_duration)}",
        f"  Most used type:  {stats.most_used_exercise_type}",
        f"  Completion:      {format_number(stats.completion_percentage)}%",
        f"  Workouts/week:   {format_number(stats.workouts_per_week)}",
        f"  Grid:            {layout.rows} x {layout.columns}",
        f"Heatmap {year}",
        f"  Active days:     {heatmap.active_days}",
        f"  Total activity:  {heatmap.total_count}",
        f"  Current streak:  {heatmap.current_streak}",
        f"  Longest streak:  {heatmap.longest_streak}",
    ]

    records = service.get_personal_records(limit=record_limit)
    if records:
        lines.append("Recent personal records")
        lines.extend(f"  {PersonalRecordFormatter(r).summary_line()}" for r in records)
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fitness analytics report")
    parser.add_argument("--path", type=Path, default=HISTORY_PATH, help="JSON history export")
    parser.add_argument("--user", default=USER_ID, help="Override the export's user id")
    parser.add_argument(
        "--range", dest="timeframe", choices=sorted(_RANGE_CHOICES), default="this-month"
    )
    parser.add_argument("--year", type=int, default=None, help="Heatmap year (default: current)")
    parser.add_argument("--measure", choices=("workouts", "sets"), default=HEATMAP_MEASURE)
    parser.add_argument("--records", type=int, default=5, help="Personal records to list")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        history = load_history(args.path, user_id=args.user or None)
    except HistoryImportError as exc:
        logger.error("Could not load history: %s", exc)
        return 1

    clock = SystemClock()
    service = AnalyticsService(
        history,
        clock=clock,
        measure=ActivityMeasure.from_string(args.measure),
    )
    year = args.year or clock.today().year
    for line in build_report(service, _RANGE_CHOICES[args.timeframe], year, args.records):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
