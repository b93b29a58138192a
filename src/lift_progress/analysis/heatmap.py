"""Training consistency heat map over a rolling calendar window."""

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List

from ..models import HeatMapData, HeatMapDay, WorkoutRecord

logger = logging.getLogger(__name__)


DEFAULT_WINDOW_DAYS = 84  # 12 weeks


def window_start(today: date, window_days: int = DEFAULT_WINDOW_DAYS) -> date:
    return today - timedelta(days=window_days)


def sunday_weekday(day: date) -> int:
    """Weekday numbered from Sunday (0) to Saturday (6)."""
    return (day.weekday() + 1) % 7


def intensity_for(sets: int, max_sets: int) -> int:
    """
    Bucket a day's set count into 0-4 relative to the window maximum.

    The scale is relative: the same set count can land in different buckets
    across calls when the window maximum changes.
    """
    if sets <= 0:
        return 0
    if sets >= max_sets * 0.75:
        return 4
    if sets >= max_sets * 0.5:
        return 3
    if sets >= max_sets * 0.25:
        return 2
    return 1


def build_heat_map(
    records: Iterable[WorkoutRecord],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> HeatMapData:
    """
    Build week rows of daily training intensity ending today.

    Only completed, non-cancelled records dated on or after the window start
    count. Weeks run Sunday to Saturday; the first row starts on the Sunday on
    or before the window start and the last row may be partial.

    Args:
        records: Workout documents in the window (in-progress ones are ignored)
        today: Last calendar day shown
        window_days: Days to look back from today

    Returns:
        HeatMapData with week rows and the maximum daily set count
    """
    start = window_start(today, window_days)
    start_text = start.isoformat()

    daily: Dict[str, Dict[str, int]] = {}
    max_sets = 0

    for record in records:
        if not record.is_completed or record.is_cancelled:
            continue
        day_text = record.date
        if not day_text or day_text < start_text:
            continue

        totals = daily.setdefault(day_text, {"sets": 0, "workouts": 0})
        for logged in (record.exercises or {}).values():
            totals["sets"] += len(logged.valid_sets)
        totals["workouts"] += 1

        if totals["sets"] > max_sets:
            max_sets = totals["sets"]

    weeks: List[List[HeatMapDay]] = []
    current_week: List[HeatMapDay] = []

    day = start - timedelta(days=sunday_weekday(start))
    while day <= today:
        day_text = day.isoformat()
        totals = daily.get(day_text, {"sets": 0, "workouts": 0})
        weekday = sunday_weekday(day)

        current_week.append(
            HeatMapDay(
                date=day_text,
                weekday=weekday,
                sets=totals["sets"],
                workouts=totals["workouts"],
                intensity=intensity_for(totals["sets"], max_sets),
                is_today=day == today,
                is_future=day > today,
            )
        )

        if weekday == 6:
            weeks.append(current_week)
            current_week = []
        day += timedelta(days=1)

    if current_week:
        weeks.append(current_week)

    logger.debug(f"Heat map spans {len(weeks)} weeks, max {max_sets} sets/day")
    return HeatMapData(weeks=weeks, max_sets=max_sets)
