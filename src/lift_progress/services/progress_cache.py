"""Time-boxed cache of the aggregated progress map."""

import logging
from datetime import datetime
from enum import Enum
from typing import Awaitable, Callable, Optional

from ..clock import Clock, SystemClock
from ..models import ProgressMap

logger = logging.getLogger(__name__)


DEFAULT_TTL_SECONDS = 300  # 5 minutes

# Fetches records for a user and aggregates them
ProgressLoader = Callable[[str], Awaitable[ProgressMap]]


class CacheState(str, Enum):
    ABSENT = "absent"
    STALE = "stale"
    FRESH = "fresh"


class ProgressCache:
    """
    Holds the latest progress map with the time it was built.

    A fresh map is returned as the same object until it expires or is
    cleared. There is no lock: concurrent forced refreshes each run the
    loader and the last one to finish wins.
    """

    def __init__(
        self,
        loader: ProgressLoader,
        user_provider: Callable[[], Optional[str]],
        clock: Optional[Clock] = None,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._loader = loader
        self._user_provider = user_provider
        self._clock = clock or SystemClock()
        self._ttl_seconds = ttl_seconds
        self._map: Optional[ProgressMap] = None
        self._built_at: Optional[datetime] = None

    @property
    def built_at(self) -> Optional[datetime]:
        return self._built_at

    @property
    def state(self) -> CacheState:
        if self._map is None or self._built_at is None:
            return CacheState.ABSENT
        age = (self._clock.now() - self._built_at).total_seconds()
        if age < self._ttl_seconds:
            return CacheState.FRESH
        return CacheState.STALE

    async def get(self, force_refresh: bool = False) -> ProgressMap:
        """
        Return the cached map, rebuilding it when forced, stale or absent.

        Without a signed-in user an empty map is returned and nothing is
        fetched or stored. Loader failures are logged and also yield an
        empty, uncached map.
        """
        if not force_refresh and self.state is CacheState.FRESH:
            logger.debug("Progress cache hit")
            return self._map

        user_id = self._user_provider()
        if not user_id:
            logger.debug("No signed-in user, returning empty progress")
            return {}

        try:
            progress = await self._loader(user_id)
        except Exception as e:
            logger.error(f"Failed to load exercise progress: {e}")
            return {}

        self._map = progress
        self._built_at = self._clock.now()
        logger.info(f"Progress cache rebuilt with {len(progress)} exercises")
        return progress

    def clear(self) -> None:
        """Drop the cached map so the next read rebuilds it."""
        self._map = None
        self._built_at = None
