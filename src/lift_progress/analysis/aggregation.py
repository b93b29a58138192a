"""Aggregation of workout records into per exercise + equipment progress series."""

import logging
from typing import Iterable, List, Optional, Tuple

from ..models import (
    UNKNOWN_LOCATION,
    BestSet,
    LoggedSet,
    ProgressEntry,
    ProgressMap,
    SessionEntry,
    WorkoutRecord,
    make_exercise_key,
)
from .keys import KeyResolver

logger = logging.getLogger(__name__)


def summarize_sets(sets: Iterable[LoggedSet]) -> Tuple[float, int, float, Optional[BestSet]]:
    """
    Reduce a slot's sets to (max_weight, max_reps, total_volume, best_set).

    Only valid sets (reps and weight both non-zero) count. The best set is the
    first one reaching the heaviest weight; max_reps are that set's reps.
    """
    max_weight = 0.0
    max_reps = 0
    total_volume = 0.0
    best_set: Optional[BestSet] = None

    for logged_set in sets:
        if not logged_set.is_valid:
            continue
        total_volume += logged_set.reps * logged_set.weight
        if logged_set.weight > max_weight:
            max_weight = logged_set.weight
            max_reps = logged_set.reps
            best_set = BestSet(weight=logged_set.weight, reps=logged_set.reps)

    return max_weight, max_reps, total_volume, best_set


def _completion_order(records: Iterable[WorkoutRecord]) -> List[WorkoutRecord]:
    return sorted(records, key=lambda record: record.completed_at or "")


def aggregate(
    records: Iterable[WorkoutRecord],
    resolver: Optional[KeyResolver] = None,
) -> ProgressMap:
    """
    Build the progress map from workout records.

    Records are walked in ascending completion order. Each exercise slot
    contributes at most one session to its exercise + equipment series, and
    only when a set with positive weight was logged. Sessions of every series
    are sorted ascending by ISO date on return.

    Args:
        records: Workout documents for one user
        resolver: Equipment/body part resolver; an empty catalog if omitted

    Returns:
        Mapping of "exercise|equipment" key to ProgressEntry
    """
    resolver = resolver or KeyResolver()
    progress: ProgressMap = {}

    for record in _completion_order(records):
        if record.is_cancelled:
            continue
        if not record.exercises or not record.exercise_names:
            continue

        workout_date = record.session_date
        if not workout_date:
            logger.debug(f"Skipping workout {record.id!r} without a date")
            continue
        location = record.location or UNKNOWN_LOCATION

        for slot_id, logged in record.exercises.items():
            exercise_name = record.exercise_names.get(slot_id)
            if not exercise_name or not logged.sets:
                continue

            equipment = resolver.resolve_equipment(record, slot_id, logged)
            key = make_exercise_key(exercise_name, equipment)

            entry = progress.get(key)
            if entry is None:
                entry = ProgressEntry(
                    exercise=exercise_name,
                    equipment=equipment,
                    body_part=resolver.resolve_body_part(exercise_name, record, slot_id, logged),
                )
                progress[key] = entry

            max_weight, max_reps, total_volume, best_set = summarize_sets(logged.sets)
            if max_weight > 0:
                entry.sessions.append(
                    SessionEntry(
                        date=workout_date,
                        max_weight=max_weight,
                        max_reps=max_reps,
                        total_volume=total_volume,
                        location=location,
                        best_set=best_set,
                    )
                )

    for entry in progress.values():
        entry.sessions.sort(key=lambda session: session.date)

    logger.debug(f"Aggregated {len(progress)} exercise series")
    return progress
