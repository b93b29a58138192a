"""Shared fixtures: fake collaborators, a controllable clock and record builders."""

from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from lift_progress.config import Settings
from lift_progress.models import CatalogExercise, PRGroup, WorkoutRecord


SetSpec = Tuple[Optional[int], Optional[float]]


class FakeClock:
    """Clock whose time only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class FakeRecordSource:
    """In-memory RecordSource honouring the ordering contract."""

    def __init__(self, records: Optional[List[WorkoutRecord]] = None) -> None:
        self.records = list(records or [])
        self.error: Optional[Exception] = None
        self.completed_calls: List[str] = []
        self.range_calls: List[Tuple[str, str]] = []

    async def get_completed_workouts(self, user_id: str) -> List[WorkoutRecord]:
        self.completed_calls.append(user_id)
        if self.error is not None:
            raise self.error
        completed = [r for r in self.records if r.completed_at]
        return sorted(completed, key=lambda r: r.completed_at)

    async def get_workouts_in_date_range(self, user_id: str, from_date: str) -> List[WorkoutRecord]:
        self.range_calls.append((user_id, from_date))
        if self.error is not None:
            raise self.error
        in_range = [r for r in self.records if r.date and r.date >= from_date]
        return sorted(in_range, key=lambda r: r.date)


class FakeCatalog:
    def __init__(self, entries: Optional[List[CatalogExercise]] = None) -> None:
        self.entries = list(entries or [])
        self.error: Optional[Exception] = None

    async def list_exercises(self) -> List[CatalogExercise]:
        if self.error is not None:
            raise self.error
        return self.entries


class FakePRTracker:
    def __init__(self, groups: Optional[List[PRGroup]] = None) -> None:
        self.groups = list(groups or [])
        self.error: Optional[Exception] = None
        self.clear_calls = 0

    async def get_all_prs(self) -> List[PRGroup]:
        if self.error is not None:
            raise self.error
        return self.groups

    def clear(self) -> None:
        self.clear_calls += 1


def build_record(
    day: Optional[str],
    exercises: Dict[str, Sequence[SetSpec]],
    location: Optional[str] = "Home Gym",
    completed: bool = True,
    cancelled: bool = False,
    equipment: Optional[Dict[str, str]] = None,
    body_parts: Optional[Dict[str, str]] = None,
    completed_at: Optional[str] = None,
    record_id: Optional[str] = None,
) -> WorkoutRecord:
    """
    Build a workout document the way the record store keeps it.

    ``exercises`` maps exercise names to (reps, weight) tuples; each entry
    becomes an ``exercise_<N>`` slot with a matching template exercise that
    carries the given equipment and body part overrides.
    """
    equipment = equipment or {}
    body_parts = body_parts or {}
    slots = {}
    names = {}
    template = []

    for index, (name, sets) in enumerate(exercises.items()):
        slot_id = f"exercise_{index}"
        names[slot_id] = name
        slots[slot_id] = {"sets": [{"reps": reps, "weight": weight} for reps, weight in sets]}
        template.append({
            "name": name,
            "equipment": equipment.get(name),
            "bodyPart": body_parts.get(name),
        })

    if completed and completed_at is None:
        completed_at = f"{day}T18:00:00.000Z"

    return WorkoutRecord.model_validate({
        "id": record_id or f"workout-{day}",
        "date": day,
        "completedAt": completed_at if completed else None,
        "cancelledAt": f"{day}T18:30:00.000Z" if cancelled else None,
        "location": location,
        "exercises": slots,
        "exerciseNames": names,
        "originalWorkout": {"name": "Template", "exercises": template},
    })


# Saturday
TODAY = datetime(2025, 3, 15, 12, 0, 0)


@pytest.fixture
def make_record():
    """Factory building WorkoutRecord documents."""
    return build_record


@pytest.fixture
def clock():
    return FakeClock(TODAY)


@pytest.fixture
def record_source():
    return FakeRecordSource()


@pytest.fixture
def catalog():
    return FakeCatalog([
        CatalogExercise(name="Bench Press", body_part="Chest", equipment="Barbell"),
        CatalogExercise(name="Barbell Row", body_part="Back", equipment="Barbell"),
        CatalogExercise(name="Squat", body_part="Quads", equipment="Barbell"),
    ])


@pytest.fixture
def pr_tracker():
    return FakePRTracker()


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the environment."""
    return Settings(_env_file=None, data_dir=tmp_path, user_id="user-1")


@pytest.fixture
def history(make_record):
    """Three months of push/pull/legs training."""
    equipment = {"Bench Press": "Barbell", "Barbell Row": "Barbell", "Squat": "Barbell"}
    return [
        make_record("2024-12-20", {"Bench Press": [(8, 185), (6, 195)]}, equipment=equipment),
        make_record("2025-01-10", {"Bench Press": [(5, 200)], "Barbell Row": [(10, 135)]}, equipment=equipment),
        make_record("2025-02-20", {"Squat": [(5, 225), (5, 245)]}, equipment=equipment),
        make_record("2025-03-01", {"Bench Press": [(5, 205), (8, 185)], "Squat": [(5, 255)]}, equipment=equipment),
        make_record("2025-03-10", {"Barbell Row": [(8, 155)]}, equipment=equipment, location="Hotel Gym"),
    ]
