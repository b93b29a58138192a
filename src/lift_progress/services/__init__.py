"""Services for exercise progress analytics."""

from .base import BaseService, ExerciseCatalog, PRTracker, RecordSource, UserProvider
from .progress_cache import CacheState, ProgressCache
from .pr_tracker import PRCheck, PRType, PersonalRecordTracker
from .progress_service import ExerciseProgressService

__all__ = [
    # Base classes
    "BaseService",
    "ExerciseCatalog",
    "PRTracker",
    "RecordSource",
    "UserProvider",
    # Cache
    "CacheState",
    "ProgressCache",
    # Services
    "PRCheck",
    "PRType",
    "PersonalRecordTracker",
    "ExerciseProgressService",
]
