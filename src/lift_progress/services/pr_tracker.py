"""
Personal-record tracking per exercise + equipment.

Tracks three marks for every combination:
- Max weight: heaviest valid set
- Max reps: most reps in a single set
- Max volume: largest reps x weight for a single set

Workouts dated before the cutoff date are ignored.
"""

from enum import Enum
from typing import Dict, List, Optional
import logging

from pydantic import BaseModel

from .base import BaseService, ExerciseCatalog, RecordSource, UserProvider
from ..analysis.keys import KeyResolver
from ..analysis.pr_timeline import SIGNIFICANT_PR_MIN_REPS, build_pr_timeline
from ..exceptions import PRTrackerError
from ..models import (
    OTHER_BODY_PART,
    UNKNOWN_LOCATION,
    ExercisePRs,
    PRGroup,
    PRMark,
    PRTimelineItem,
    WorkoutRecord,
)


PR_CUTOFF_DATE = "2024-11-30"


class PRType(str, Enum):
    FIRST = "first"
    MAX_WEIGHT = "maxWeight"
    MAX_REPS = "maxReps"
    MAX_VOLUME = "maxVolume"


class PRCheck(BaseModel):
    """Outcome of testing one set against the current marks."""

    is_new_pr: bool = False
    pr_type: Optional[PRType] = None
    previous: Optional[PRMark] = None


class PersonalRecordTracker(BaseService):
    """
    In-memory PR tracker built from completed workouts.

    Equipment and body part are resolved with the same KeyResolver rules as
    the progress map, so PR groups line up with progress series keys.
    """

    def __init__(
        self,
        record_source: Optional[RecordSource] = None,
        catalog: Optional[ExerciseCatalog] = None,
        user_provider: Optional[UserProvider] = None,
        cutoff_date: str = PR_CUTOFF_DATE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(user_provider=user_provider, logger=logger)
        self._record_source = record_source
        self._catalog = catalog
        self._cutoff_date = cutoff_date
        self._prs: Dict[str, Dict[str, ExercisePRs]] = {}
        self._body_parts: Dict[str, str] = {}
        self._loaded = False

    @property
    def cutoff_date(self) -> str:
        return self._cutoff_date

    def clear(self) -> None:
        """Forget every recorded mark."""
        self._prs = {}
        self._body_parts = {}
        self._loaded = False

    # =========================================================================
    # Detection and recording
    # =========================================================================

    def get_exercise_prs(self, exercise: str, equipment: str) -> Optional[ExercisePRs]:
        return self._prs.get(exercise, {}).get(equipment)

    def check_for_new_pr(
        self,
        exercise: str,
        reps: Optional[int],
        weight: Optional[float],
        equipment: str,
    ) -> PRCheck:
        """
        Test a set against the current marks.

        The first set for a combination is always a PR. Otherwise the checks
        run in order: heavier than the max weight, more reps than the max-reps
        mark at the same or a heavier weight, then a larger single-set volume.
        """
        if not reps or not weight:
            return PRCheck()

        current = self.get_exercise_prs(exercise, equipment)
        if current is None:
            return PRCheck(is_new_pr=True, pr_type=PRType.FIRST)

        volume = reps * weight

        if current.max_weight is None or weight > current.max_weight.weight:
            return PRCheck(is_new_pr=True, pr_type=PRType.MAX_WEIGHT, previous=current.max_weight)
        if (
            current.max_reps is not None
            and weight >= current.max_reps.weight
            and reps > current.max_reps.reps
        ):
            return PRCheck(is_new_pr=True, pr_type=PRType.MAX_REPS, previous=current.max_reps)
        if current.max_volume is None or volume > (current.max_volume.volume or 0):
            return PRCheck(is_new_pr=True, pr_type=PRType.MAX_VOLUME, previous=current.max_volume)

        return PRCheck()

    def record_pr(
        self,
        exercise: str,
        reps: int,
        weight: float,
        equipment: str,
        date: str,
        location: Optional[str] = None,
        body_part: Optional[str] = None,
    ) -> bool:
        """
        Update each mark the set beats. Returns False when the date is
        before the cutoff and nothing was recorded.
        """
        if date < self._cutoff_date:
            return False

        location = location or UNKNOWN_LOCATION
        volume = reps * weight

        # Latest body part wins for the exercise
        self._body_parts[exercise] = body_part or OTHER_BODY_PART
        prs = self._prs.setdefault(exercise, {}).setdefault(equipment, ExercisePRs())

        if prs.max_weight is None or weight > prs.max_weight.weight:
            prs.max_weight = PRMark(weight=weight, reps=reps, date=date, location=location)
        if prs.max_reps is None or reps > prs.max_reps.reps:
            prs.max_reps = PRMark(weight=weight, reps=reps, date=date, location=location)
        if prs.max_volume is None or volume > (prs.max_volume.volume or 0):
            prs.max_volume = PRMark(
                weight=weight, reps=reps, date=date, location=location, volume=volume
            )
        return True

    def process_workout(
        self,
        record: WorkoutRecord,
        resolver: Optional[KeyResolver] = None,
    ) -> int:
        """
        Record PRs from every valid set of a completed workout.

        Returns:
            Number of sets that set a new PR
        """
        if record.is_cancelled or not record.exercises:
            return 0

        workout_date = record.session_date
        if not workout_date or workout_date < self._cutoff_date:
            return 0

        resolver = resolver or KeyResolver()
        names = record.exercise_names or {}
        new_pr_count = 0

        for slot_id, logged in record.exercises.items():
            exercise = names.get(slot_id)
            if not exercise or not logged.sets:
                continue

            equipment = resolver.resolve_equipment(record, slot_id, logged)
            body_part = resolver.resolve_body_part(exercise, record, slot_id, logged)

            for logged_set in logged.valid_sets:
                check = self.check_for_new_pr(exercise, logged_set.reps, logged_set.weight, equipment)
                if not check.is_new_pr:
                    continue
                self.record_pr(
                    exercise,
                    logged_set.reps,
                    logged_set.weight,
                    equipment,
                    date=workout_date,
                    location=record.location,
                    body_part=body_part,
                )
                new_pr_count += 1

        if new_pr_count:
            self.logger.debug(f"Workout {record.id!r} set {new_pr_count} PRs")
        return new_pr_count

    async def rebuild(self, user_id: Optional[str] = None) -> int:
        """
        Replay all completed workouts of the user from the record source.

        Returns:
            Total number of PR-setting sets

        Raises:
            PRTrackerError: If the record source cannot be read
        """
        if self._record_source is None:
            raise PRTrackerError("No record source configured")

        user_id = user_id or self.current_user()
        if not user_id:
            self.logger.debug("No signed-in user, PR tracker left empty")
            self.clear()
            return 0

        try:
            records = await self._record_source.get_completed_workouts(user_id)
        except Exception as e:
            raise PRTrackerError(f"Failed to load workouts for PRs: {e}") from e

        resolver = KeyResolver()
        if self._catalog is not None:
            try:
                resolver = KeyResolver(await self._catalog.list_exercises())
            except Exception as e:
                self.logger.warning(f"Exercise catalog unavailable for PRs: {e}")

        self.clear()
        total = sum(self.process_workout(record, resolver) for record in records)
        self._loaded = True
        self.logger.info(f"PR tracker rebuilt from {len(records)} workouts ({total} PR sets)")
        return total

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_all_prs(self) -> List[PRGroup]:
        """PR marks grouped by exercise + equipment, loading them on first use."""
        if not self._loaded and self._record_source is not None:
            await self.rebuild()
        return self.list_groups()

    def list_groups(self) -> List[PRGroup]:
        return [
            PRGroup(
                exercise=exercise,
                equipment=equipment,
                body_part=self._body_parts.get(exercise, OTHER_BODY_PART),
                prs=prs,
            )
            for exercise, by_equipment in self._prs.items()
            for equipment, prs in by_equipment.items()
        ]

    def get_recent_prs(self, count: int = 5) -> List[PRTimelineItem]:
        """Most recent significant max-weight PRs."""
        return build_pr_timeline(self.list_groups(), limit=count, min_reps=SIGNIFICANT_PR_MIN_REPS)

    def get_prs_by_body_part(self) -> Dict[str, Dict[str, Dict[str, ExercisePRs]]]:
        """PR marks as {body part: {exercise: {equipment: marks}}}."""
        grouped: Dict[str, Dict[str, Dict[str, ExercisePRs]]] = {}
        for exercise, by_equipment in self._prs.items():
            body_part = self._body_parts.get(exercise, OTHER_BODY_PART)
            grouped.setdefault(body_part, {})[exercise] = dict(by_equipment)
        return grouped

    def get_total_pr_count(self) -> int:
        """Number of exercise + equipment combinations with marks."""
        return sum(len(by_equipment) for by_equipment in self._prs.values())
