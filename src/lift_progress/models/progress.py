"""Progress analytics output models."""

import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import Field

from .records import CamelModel

logger = logging.getLogger(__name__)


KEY_SEPARATOR = "|"
UNKNOWN_EQUIPMENT = "Unknown"
UNKNOWN_LOCATION = "Unknown"
OTHER_BODY_PART = "Other"


class TimeRange(str, Enum):
    """Time windows for progress queries."""
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL = "ALL"

    @classmethod
    def parse(cls, value: Union[str, "TimeRange", None]) -> "TimeRange":
        """Coerce user input to a TimeRange; unknown values mean ALL."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.ALL
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            logger.warning(f"Unknown time range {value!r}, using ALL")
            return cls.ALL


class TrainingCategory(str, Enum):
    """Coarse training split derived from body part."""
    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    CORE = "Core"
    OTHER = "Other"


CATEGORY_ORDER = [
    TrainingCategory.PUSH,
    TrainingCategory.PULL,
    TrainingCategory.LEGS,
    TrainingCategory.CORE,
    TrainingCategory.OTHER,
]


def make_exercise_key(exercise: str, equipment: str) -> str:
    """Compose the exercise + equipment key identifying one progress series."""
    return f"{exercise}{KEY_SEPARATOR}{equipment}"


class BestSet(CamelModel):
    weight: float
    reps: int


class SessionEntry(CamelModel):
    """One workout's contribution to a progress series."""

    date: str
    max_weight: float
    max_reps: int
    total_volume: float
    location: str = UNKNOWN_LOCATION
    best_set: Optional[BestSet] = None


class ProgressEntry(CamelModel):
    """Aggregated time series for one exercise + equipment combination."""

    exercise: str
    equipment: str
    body_part: str = OTHER_BODY_PART
    sessions: List[SessionEntry] = Field(default_factory=list)

    @property
    def latest_date(self) -> Optional[str]:
        return self.sessions[-1].date if self.sessions else None


ProgressMap = Dict[str, ProgressEntry]


class ExerciseStats(CamelModel):
    """Summary statistics over a windowed session list."""

    session_count: int
    start_weight: float
    current_weight: float
    max_weight: float
    min_weight: float
    improvement: float
    improvement_percent: float
    pr_date: Optional[str] = None
    pr_reps: Optional[int] = None
    first_date: str
    last_date: str


class ExerciseListItem(CamelModel):
    key: str
    exercise: str
    equipment: str
    body_part: str
    category: TrainingCategory
    session_count: int
    latest_date: Optional[str] = None


class HierarchyItem(CamelModel):
    key: str
    equipment: str
    body_part: str
    session_count: int
    latest_date: Optional[str] = None


ExerciseHierarchy = Dict[str, Dict[str, List[HierarchyItem]]]


class ExerciseProgressData(CamelModel):
    exercise: str
    equipment: str
    body_part: str
    sessions: List[SessionEntry] = Field(default_factory=list)
    stats: Optional[ExerciseStats] = None


class ChartTooltip(CamelModel):
    date: str
    weight: float
    reps: int
    location: str


class ChartData(CamelModel):
    labels: List[str] = Field(default_factory=list)
    data: List[float] = Field(default_factory=list)
    tooltips: List[ChartTooltip] = Field(default_factory=list)
    stats: Optional[ExerciseStats] = None


class HeatMapDay(CamelModel):
    """One calendar cell; weekday is 0 for Sunday through 6 for Saturday."""

    date: str
    weekday: int
    sets: int = 0
    workouts: int = 0
    intensity: int = 0
    is_today: bool = False
    is_future: bool = False


class HeatMapData(CamelModel):
    weeks: List[List[HeatMapDay]] = Field(default_factory=list)
    max_sets: int = 0


class DistributionSlice(CamelModel):
    body_part: str
    total_volume: float
    percentage: int
    color_index: int


class BodyPartDistribution(CamelModel):
    labels: List[str] = Field(default_factory=list)
    data: List[float] = Field(default_factory=list)
    percentages: List[int] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    total: float = 0
    slices: List[DistributionSlice] = Field(default_factory=list)


class PRTimelineItem(CamelModel):
    exercise: str
    equipment: str
    body_part: str
    weight: float
    reps: int
    date: str
    location: Optional[str] = None
