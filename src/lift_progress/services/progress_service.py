"""
Exercise progress service.

Handles:
- Building and caching the per exercise + equipment progress map
- Exercise lists and the category hierarchy
- Per-exercise progress, stats and chart data
- Body-part distribution, heat map and PR timeline
"""

from typing import Dict, List, Optional, Union
import logging

from .base import BaseService, ExerciseCatalog, PRTracker, RecordSource, UserProvider
from .progress_cache import ProgressCache
from ..analysis.aggregation import aggregate
from ..analysis.categories import classify
from ..analysis.distribution import build_distribution
from ..analysis.heatmap import build_heat_map, window_start
from ..analysis.keys import KeyResolver
from ..analysis.pr_timeline import build_pr_timeline
from ..analysis.stats import compute_stats, filter_sessions, format_date_short
from ..clock import Clock, SystemClock, today
from ..config import Settings, get_settings
from ..models import (
    CATEGORY_ORDER,
    OTHER_BODY_PART,
    BodyPartDistribution,
    ChartData,
    ChartTooltip,
    ExerciseHierarchy,
    ExerciseListItem,
    ExerciseProgressData,
    HeatMapData,
    HierarchyItem,
    PRTimelineItem,
    ProgressMap,
    TimeRange,
)


class ExerciseProgressService(BaseService):
    """
    Read-side analytics over a user's workout history.

    Every public accessor fails soft: fetch errors are logged and turned into
    empty results, and a missing signed-in user short-circuits to an empty
    result without fetching.
    """

    def __init__(
        self,
        record_source: RecordSource,
        catalog: Optional[ExerciseCatalog] = None,
        pr_tracker: Optional[PRTracker] = None,
        user_provider: Optional[UserProvider] = None,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(user_provider=user_provider, logger=logger)
        self._record_source = record_source
        self._catalog = catalog
        self._pr_tracker = pr_tracker
        self._clock = clock or SystemClock()
        self._settings = settings or get_settings()
        self._cache = ProgressCache(
            loader=self._build_progress,
            user_provider=self.current_user,
            clock=self._clock,
            ttl_seconds=self._settings.cache_ttl_seconds,
        )

    @property
    def cache(self) -> ProgressCache:
        return self._cache

    async def _load_resolver(self) -> KeyResolver:
        if self._catalog is None:
            return KeyResolver()
        try:
            return KeyResolver(await self._catalog.list_exercises())
        except Exception as e:
            self.logger.warning(f"Exercise catalog unavailable, body parts fall back to 'Other': {e}")
            return KeyResolver()

    async def _build_progress(self, user_id: str) -> ProgressMap:
        records = await self._record_source.get_completed_workouts(user_id)
        resolver = await self._load_resolver()
        return aggregate(records, resolver)

    # =========================================================================
    # Progress map
    # =========================================================================

    async def load_exercise_progress(self, force_refresh: bool = False) -> ProgressMap:
        """Progress map keyed by "exercise|equipment", cached for the TTL."""
        return await self._cache.get(force_refresh=force_refresh)

    def clear_progress_cache(self) -> None:
        self._cache.clear()

    async def on_workout_completed(self) -> None:
        """Invalidation hook for a newly completed workout."""
        self.logger.debug("Workout completed, clearing progress cache and PRs")
        self._cache.clear()
        if self._pr_tracker is not None:
            self._pr_tracker.clear()

    # =========================================================================
    # Exercise listings
    # =========================================================================

    async def get_exercise_list(self) -> List[ExerciseListItem]:
        """
        All tracked exercise series, most recently trained first.

        Ties on the latest date go to the series with more sessions; series
        without sessions come last.
        """
        progress = await self.load_exercise_progress()

        items = [
            ExerciseListItem(
                key=key,
                exercise=entry.exercise,
                equipment=entry.equipment,
                body_part=entry.body_part,
                category=classify(entry.body_part),
                session_count=len(entry.sessions),
                latest_date=entry.latest_date,
            )
            for key, entry in progress.items()
        ]

        items.sort(key=lambda item: item.session_count, reverse=True)
        items.sort(key=lambda item: item.latest_date or "", reverse=True)
        return items

    async def get_exercise_hierarchy(self) -> ExerciseHierarchy:
        """Series grouped as {category: {exercise: [equipment variants]}}."""
        grouped: Dict[str, Dict[str, List[HierarchyItem]]] = {}

        for item in await self.get_exercise_list():
            variants = grouped.setdefault(item.category.value, {}).setdefault(item.exercise, [])
            variants.append(
                HierarchyItem(
                    key=item.key,
                    equipment=item.equipment,
                    body_part=item.body_part,
                    session_count=item.session_count,
                    latest_date=item.latest_date,
                )
            )

        for exercises in grouped.values():
            for variants in exercises.values():
                variants.sort(key=lambda variant: variant.session_count, reverse=True)

        return {
            category.value: grouped[category.value]
            for category in CATEGORY_ORDER
            if grouped.get(category.value)
        }

    async def get_exercises_by_body_part(self) -> Dict[str, List[ExerciseListItem]]:
        """Exercise list grouped by body part, keeping list order."""
        grouped: Dict[str, List[ExerciseListItem]] = {}
        for item in await self.get_exercise_list():
            grouped.setdefault(item.body_part or OTHER_BODY_PART, []).append(item)
        return grouped

    # =========================================================================
    # Per-exercise progress
    # =========================================================================

    async def get_exercise_progress_data(
        self,
        key: str,
        time_range: Union[TimeRange, str, None] = TimeRange.ALL,
    ) -> Optional[ExerciseProgressData]:
        """
        Sessions and stats of one series inside a time window.

        Returns:
            ExerciseProgressData, or None when the key is unknown. An empty
            window gives no sessions and no stats.
        """
        progress = await self.load_exercise_progress()
        entry = progress.get(key)
        if entry is None:
            return None

        current_day = today(self._clock)
        sessions = filter_sessions(entry.sessions, time_range, current_day)

        return ExerciseProgressData(
            exercise=entry.exercise,
            equipment=entry.equipment,
            body_part=entry.body_part,
            sessions=sessions,
            stats=compute_stats(sessions, TimeRange.ALL, current_day) if sessions else None,
        )

    async def get_chart_data(
        self,
        key: str,
        time_range: Union[TimeRange, str, None] = TimeRange.ALL,
    ) -> ChartData:
        """Chart series of session max weights with short date labels."""
        progress_data = await self.get_exercise_progress_data(key, time_range)
        if progress_data is None or not progress_data.sessions:
            return ChartData()

        sessions = progress_data.sessions
        return ChartData(
            labels=[format_date_short(s.date) for s in sessions],
            data=[s.max_weight for s in sessions],
            tooltips=[
                ChartTooltip(date=s.date, weight=s.max_weight, reps=s.max_reps, location=s.location)
                for s in sessions
            ],
            stats=progress_data.stats,
        )

    # =========================================================================
    # Overviews
    # =========================================================================

    async def get_body_part_distribution(
        self,
        time_range: Union[TimeRange, str, None] = None,
    ) -> BodyPartDistribution:
        """Volume share per body part; defaults to the configured window."""
        if time_range is None:
            time_range = self._settings.distribution_time_range
        progress = await self.load_exercise_progress()
        return build_distribution(progress, time_range, today(self._clock))

    async def get_heat_map_data(self) -> HeatMapData:
        """Daily training intensity over the configured window, by week."""
        user_id = self.current_user()
        if not user_id:
            return HeatMapData()

        current_day = today(self._clock)
        window_days = self._settings.heat_map_window_days
        from_date = window_start(current_day, window_days).isoformat()

        try:
            records = await self._record_source.get_workouts_in_date_range(user_id, from_date)
        except Exception as e:
            self.logger.error(f"Error getting heat map data: {e}")
            return HeatMapData()

        return build_heat_map(records, current_day, window_days)

    async def get_pr_timeline(self, limit: Optional[int] = None) -> List[PRTimelineItem]:
        """Significant max-weight PRs, newest first."""
        if self._pr_tracker is None:
            return []
        if limit is None:
            limit = self._settings.pr_timeline_limit

        try:
            groups = await self._pr_tracker.get_all_prs()
        except Exception as e:
            self.logger.error(f"Error getting PR timeline: {e}")
            return []

        return build_pr_timeline(
            groups,
            limit=limit,
            min_reps=self._settings.significant_pr_min_reps,
        )
