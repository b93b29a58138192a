"""Data models for the Lift Progress engine."""

from .records import (
    CatalogExercise,
    ExercisePRs,
    LoggedExercise,
    LoggedSet,
    PRGroup,
    PRMark,
    TemplateExercise,
    WorkoutRecord,
    WorkoutTemplate,
    to_camel,
)
from .progress import (
    CATEGORY_ORDER,
    KEY_SEPARATOR,
    OTHER_BODY_PART,
    UNKNOWN_EQUIPMENT,
    UNKNOWN_LOCATION,
    BestSet,
    BodyPartDistribution,
    ChartData,
    ChartTooltip,
    DistributionSlice,
    ExerciseHierarchy,
    ExerciseListItem,
    ExerciseProgressData,
    ExerciseStats,
    HeatMapData,
    HeatMapDay,
    HierarchyItem,
    PRTimelineItem,
    ProgressEntry,
    ProgressMap,
    SessionEntry,
    TimeRange,
    TrainingCategory,
    make_exercise_key,
)

__all__ = [
    # Input records
    "CatalogExercise",
    "ExercisePRs",
    "LoggedExercise",
    "LoggedSet",
    "PRGroup",
    "PRMark",
    "TemplateExercise",
    "WorkoutRecord",
    "WorkoutTemplate",
    "to_camel",
    # Progress output
    "CATEGORY_ORDER",
    "KEY_SEPARATOR",
    "OTHER_BODY_PART",
    "UNKNOWN_EQUIPMENT",
    "UNKNOWN_LOCATION",
    "BestSet",
    "BodyPartDistribution",
    "ChartData",
    "ChartTooltip",
    "DistributionSlice",
    "ExerciseHierarchy",
    "ExerciseListItem",
    "ExerciseProgressData",
    "ExerciseStats",
    "HeatMapData",
    "HeatMapDay",
    "HierarchyItem",
    "PRTimelineItem",
    "ProgressEntry",
    "ProgressMap",
    "SessionEntry",
    "TimeRange",
    "TrainingCategory",
    "make_exercise_key",
]
