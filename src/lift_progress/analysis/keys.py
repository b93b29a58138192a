"""Identity resolution for logged exercise slots.

Each slot of a workout is identified by its exercise name, the equipment it
was performed on and the body part it trains. Equipment and body part are
resolved through a fallback chain:

Equipment:
1. Override stored on the record's originating template
2. Equipment recorded on the logged slot
3. "Unknown"

Body part:
1. Template override
2. Body part recorded on the logged slot
3. Case-insensitive exact-name lookup in the exercise catalog
4. "Other"
"""

from typing import Dict, Iterable, Optional

from ..models import (
    OTHER_BODY_PART,
    UNKNOWN_EQUIPMENT,
    CatalogExercise,
    LoggedExercise,
    WorkoutRecord,
)


class KeyResolver:
    """Resolves equipment and body part for exercise slots."""

    def __init__(self, catalog: Optional[Iterable[CatalogExercise]] = None) -> None:
        self._body_parts: Dict[str, Optional[str]] = {}
        for entry in catalog or []:
            if not entry.name:
                continue
            # First entry wins, as a linear scan would
            self._body_parts.setdefault(entry.name.lower(), entry.body_part)

    def find_catalog_body_part(self, exercise_name: Optional[str]) -> Optional[str]:
        """Body part of the catalog entry whose name matches, ignoring case."""
        if not exercise_name:
            return None
        return self._body_parts.get(exercise_name.lower())

    def resolve_equipment(
        self,
        record: WorkoutRecord,
        slot_id: str,
        logged: Optional[LoggedExercise] = None,
    ) -> str:
        template = record.template_exercise(slot_id)
        if template is not None and template.equipment:
            return template.equipment
        if logged is not None and logged.equipment:
            return logged.equipment
        return UNKNOWN_EQUIPMENT

    def resolve_body_part(
        self,
        exercise_name: Optional[str],
        record: WorkoutRecord,
        slot_id: str,
        logged: Optional[LoggedExercise] = None,
    ) -> str:
        template = record.template_exercise(slot_id)
        if template is not None and template.body_part:
            return template.body_part
        if logged is not None and logged.body_part:
            return logged.body_part
        return self.find_catalog_body_part(exercise_name) or OTHER_BODY_PART
