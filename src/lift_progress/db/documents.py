"""Parsing and ordering of raw workout and catalog documents."""

import logging
from typing import Any, Iterable, List

from pydantic import ValidationError as PydanticValidationError

from ..models import CatalogExercise, WorkoutRecord

logger = logging.getLogger(__name__)


def parse_workouts(documents: Iterable[Any]) -> List[WorkoutRecord]:
    """Validate workout documents, skipping malformed ones."""
    records: List[WorkoutRecord] = []
    for index, document in enumerate(documents):
        try:
            records.append(WorkoutRecord.model_validate(document))
        except PydanticValidationError as e:
            logger.warning(f"Skipping malformed workout document #{index}: {e.error_count()} errors")
    return records


def parse_catalog(documents: Iterable[Any]) -> List[CatalogExercise]:
    """Validate catalog documents, skipping malformed ones."""
    entries: List[CatalogExercise] = []
    for index, document in enumerate(documents):
        try:
            entries.append(CatalogExercise.model_validate(document))
        except PydanticValidationError as e:
            logger.warning(f"Skipping malformed catalog entry #{index}: {e.error_count()} errors")
    return entries


def completed_in_order(records: Iterable[WorkoutRecord]) -> List[WorkoutRecord]:
    """Completed records, ascending by completion time."""
    completed = [record for record in records if record.completed_at]
    completed.sort(key=lambda record: record.completed_at)
    return completed


def dated_from(records: Iterable[WorkoutRecord], from_date: str) -> List[WorkoutRecord]:
    """Records dated on or after ``from_date``, ascending by date."""
    in_range = [record for record in records if record.date and record.date >= from_date]
    in_range.sort(key=lambda record: record.date)
    return in_range
