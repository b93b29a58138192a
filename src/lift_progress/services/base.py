"""
Base service classes and protocols.

Defines the collaborator interfaces consumed by the progress engine and the
base class shared by its services.
"""

from abc import ABC
from typing import Callable, List, Optional, Protocol, runtime_checkable
import logging

from ..models import CatalogExercise, PRGroup, WorkoutRecord


# Returns the signed-in user's id, or None when nobody is signed in
UserProvider = Callable[[], Optional[str]]


@runtime_checkable
class RecordSource(Protocol):
    """
    Protocol for workout record stores.

    Implementations return immutable snapshots; the engine never writes back.
    """

    async def get_completed_workouts(self, user_id: str) -> List[WorkoutRecord]:
        """Completed workouts, ascending by completion time."""
        ...

    async def get_workouts_in_date_range(
        self,
        user_id: str,
        from_date: str,
    ) -> List[WorkoutRecord]:
        """Workouts dated on or after ``from_date``, ascending by date, in-progress included."""
        ...


@runtime_checkable
class ExerciseCatalog(Protocol):
    """Protocol for the exercise library."""

    async def list_exercises(self) -> List[CatalogExercise]:
        """All catalog entries."""
        ...


@runtime_checkable
class PRTracker(Protocol):
    """Protocol for personal-record trackers."""

    async def get_all_prs(self) -> List[PRGroup]:
        """PR marks grouped by exercise + equipment."""
        ...

    def clear(self) -> None:
        """Forget tracked marks so the next read replays the store."""
        ...


class BaseService(ABC):
    """
    Abstract base class for all services.

    Provides common functionality:
    - Logging setup
    - Signed-in user lookup
    """

    def __init__(
        self,
        user_provider: Optional[UserProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._user_provider = user_provider
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    def current_user(self) -> Optional[str]:
        """Signed-in user id, or None when there is no authenticated context."""
        if self._user_provider is None:
            return None
        return self._user_provider()
