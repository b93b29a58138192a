"""Input data models: workout documents, catalog entries and PR tracker output.

These mirror the documents kept by the record store. Field names are camelCase
on the wire and snake_case in Python.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


SLOT_PREFIX = "exercise_"


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class CamelModel(BaseModel):
    """Base model accepting both camelCase aliases and field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LoggedSet(CamelModel):
    """A single set as logged during a workout."""

    reps: Optional[int] = None
    weight: Optional[float] = None

    @field_validator("reps", "weight", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_valid(self) -> bool:
        """A set counts only when both reps and weight are present and non-zero."""
        return bool(self.reps) and bool(self.weight)

    @property
    def volume(self) -> float:
        if not self.is_valid:
            return 0.0
        return self.reps * self.weight


class LoggedExercise(CamelModel):
    """One exercise slot of a workout with its logged sets."""

    sets: Optional[List[LoggedSet]] = None
    equipment: Optional[str] = None
    body_part: Optional[str] = None

    @property
    def valid_sets(self) -> List[LoggedSet]:
        return [s for s in (self.sets or []) if s.is_valid]


class TemplateExercise(CamelModel):
    """Exercise entry of the template a workout was started from."""

    name: Optional[str] = None
    machine: Optional[str] = None
    equipment: Optional[str] = None
    body_part: Optional[str] = None


class WorkoutTemplate(CamelModel):
    """The originating workout template carried on a record."""

    name: Optional[str] = None
    exercises: List[TemplateExercise] = Field(default_factory=list)

    def exercise_for_slot(self, slot_id: str) -> Optional[TemplateExercise]:
        """Return the template exercise for ``exercise_<N>``, if any."""
        index_text = slot_id.replace(SLOT_PREFIX, "", 1)
        try:
            index = int(index_text)
        except ValueError:
            return None
        if 0 <= index < len(self.exercises):
            return self.exercises[index]
        return None


class WorkoutRecord(CamelModel):
    """Immutable snapshot of one workout session document."""

    id: Optional[str] = None
    date: Optional[str] = None
    completed_at: Optional[str] = None
    cancelled_at: Optional[str] = None
    location: Optional[str] = None
    exercises: Optional[Dict[str, LoggedExercise]] = None
    exercise_names: Optional[Dict[str, str]] = None
    original_workout: Optional[WorkoutTemplate] = None

    @property
    def is_cancelled(self) -> bool:
        return bool(self.cancelled_at)

    @property
    def is_completed(self) -> bool:
        return bool(self.completed_at)

    @property
    def session_date(self) -> Optional[str]:
        """Workout date, falling back to the date part of the completion time."""
        if self.date:
            return self.date
        if self.completed_at:
            return self.completed_at.split("T")[0]
        return None

    def template_exercise(self, slot_id: str) -> Optional[TemplateExercise]:
        if self.original_workout is None:
            return None
        return self.original_workout.exercise_for_slot(slot_id)


class CatalogExercise(CamelModel):
    """Exercise library entry."""

    name: Optional[str] = None
    body_part: Optional[str] = None
    equipment: Optional[str] = None


class PRMark(CamelModel):
    """One personal-record mark (max weight, max reps or max volume)."""

    weight: float
    reps: int
    date: str
    location: Optional[str] = None
    volume: Optional[float] = None


class ExercisePRs(CamelModel):
    """The PR marks tracked for one exercise + equipment combination."""

    max_weight: Optional[PRMark] = None
    max_reps: Optional[PRMark] = None
    max_volume: Optional[PRMark] = None


class PRGroup(CamelModel):
    """PR tracker output for one exercise + equipment combination."""

    exercise: str
    equipment: str
    body_part: Optional[str] = None
    prs: ExercisePRs = Field(default_factory=ExercisePRs)
