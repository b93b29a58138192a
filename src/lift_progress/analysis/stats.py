"""Time-windowed summary statistics for a progress series."""

import calendar
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence, Union

from ..models import ExerciseStats, SessionEntry, TimeRange


RANGE_MONTHS = {
    TimeRange.ONE_MONTH: 1,
    TimeRange.THREE_MONTHS: 3,
    TimeRange.SIX_MONTHS: 6,
    TimeRange.ONE_YEAR: 12,
}


def round_percent(value: float) -> float:
    """Round to one decimal, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def subtract_months(day: date, months: int) -> date:
    """Step back whole calendar months, clamping to the end of a shorter month."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def get_date_cutoff(time_range: Union[TimeRange, str, None], today: date) -> Optional[str]:
    """Earliest ISO date included in ``time_range``; None means no cutoff."""
    months = RANGE_MONTHS.get(TimeRange.parse(time_range))
    if months is None:
        return None
    return subtract_months(today, months).isoformat()


def filter_sessions(
    sessions: Sequence[SessionEntry],
    time_range: Union[TimeRange, str, None],
    today: date,
) -> List[SessionEntry]:
    """Sessions on or after the cutoff for ``time_range``."""
    cutoff = get_date_cutoff(time_range, today)
    if cutoff is None:
        return list(sessions)
    return [session for session in sessions if session.date >= cutoff]


def compute_stats(
    sessions: Sequence[SessionEntry],
    time_range: Union[TimeRange, str, None],
    today: date,
) -> Optional[ExerciseStats]:
    """
    Summarise a date-sorted session list over a time window.

    The PR session is the earliest one at the window's heaviest weight.
    Improvement is measured from the first to the last session in the window,
    with the percentage rounded to one decimal (0 when the start weight is 0).

    Returns:
        ExerciseStats, or None when no session falls in the window
    """
    window = filter_sessions(sessions, time_range, today)
    if not window:
        return None

    first_session = window[0]
    last_session = window[-1]
    weights = [session.max_weight for session in window]
    max_weight = max(weights)
    min_weight = min(weights)
    pr_session = next(session for session in window if session.max_weight == max_weight)

    start_weight = first_session.max_weight
    current_weight = last_session.max_weight
    improvement = current_weight - start_weight
    improvement_percent = round_percent(improvement / start_weight * 100) if start_weight > 0 else 0

    return ExerciseStats(
        session_count=len(window),
        start_weight=start_weight,
        current_weight=current_weight,
        max_weight=max_weight,
        min_weight=min_weight,
        improvement=improvement,
        improvement_percent=improvement_percent,
        pr_date=pr_session.date,
        pr_reps=pr_session.max_reps,
        first_date=first_session.date,
        last_date=last_session.date,
    )


def format_date_short(date_str: Optional[str]) -> str:
    """Chart label for an ISO date, e.g. "Jan 15"."""
    if not date_str:
        return ""
    try:
        parsed = date.fromisoformat(date_str)
    except ValueError:
        return date_str
    return f"{parsed:%b} {parsed.day}"
