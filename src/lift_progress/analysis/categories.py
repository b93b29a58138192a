"""Body part to training category mapping."""

from typing import Optional, Sequence, Tuple

from ..models import TrainingCategory


# Evaluated in order, first match wins. A label such as "Lower Back" matches
# both Pull and Legs and must resolve to Pull.
CATEGORY_RULES: Sequence[Tuple[TrainingCategory, Tuple[str, ...]]] = (
    (TrainingCategory.PUSH, ("chest", "shoulder", "tricep")),
    (TrainingCategory.PULL, ("back", "bicep", "rear delt")),
    (TrainingCategory.LEGS, ("leg", "quad", "hamstring", "glute", "calf", "lower")),
    (TrainingCategory.CORE, ("core", "ab", "cardio")),
)


def classify(body_part: Optional[str]) -> TrainingCategory:
    """Map a body part label to Push, Pull, Legs, Core or Other."""
    if not body_part:
        return TrainingCategory.OTHER
    label = body_part.lower()
    for category, needles in CATEGORY_RULES:
        if any(needle in label for needle in needles):
            return category
    return TrainingCategory.OTHER
