"""Exercise progress API routes."""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_progress_service
from ...exceptions import ExerciseNotFoundError
from ...models import (
    BodyPartDistribution,
    ChartData,
    ExerciseListItem,
    ExerciseProgressData,
    HeatMapData,
    HierarchyItem,
    PRTimelineItem,
)
from ...services.progress_service import ExerciseProgressService


router = APIRouter()


# ============================================================================
# Exercise Listings
# ============================================================================

@router.get("/exercises", response_model=List[ExerciseListItem])
async def list_exercises(
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """List tracked exercise + equipment series, most recent first."""
    return await service.get_exercise_list()


@router.get("/exercises/hierarchy", response_model=Dict[str, Dict[str, List[HierarchyItem]]])
async def exercise_hierarchy(
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Series grouped by training category and exercise."""
    return await service.get_exercise_hierarchy()


@router.get("/exercises/by-body-part", response_model=Dict[str, List[ExerciseListItem]])
async def exercises_by_body_part(
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Series grouped by body part."""
    return await service.get_exercises_by_body_part()


# ============================================================================
# Per-Exercise Progress
# ============================================================================

@router.get("/exercise", response_model=ExerciseProgressData)
async def exercise_progress(
    key: str = Query(..., description="Exercise key, 'exercise|equipment'"),
    time_range: Optional[str] = Query(None, alias="range", description="1M, 3M, 6M, 1Y or ALL"),
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """
    Sessions and stats for one series.

    Raises 404 when the key has no series.
    """
    data = await service.get_exercise_progress_data(key, time_range)
    if data is None:
        raise ExerciseNotFoundError(key)
    return data


@router.get("/chart", response_model=ChartData)
async def exercise_chart(
    key: str = Query(..., description="Exercise key, 'exercise|equipment'"),
    time_range: Optional[str] = Query(None, alias="range", description="1M, 3M, 6M, 1Y or ALL"),
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Chart-ready max-weight series for one exercise."""
    progress = await service.load_exercise_progress()
    if key not in progress:
        raise ExerciseNotFoundError(key)
    return await service.get_chart_data(key, time_range)


# ============================================================================
# Overviews
# ============================================================================

@router.get("/distribution", response_model=BodyPartDistribution)
async def body_part_distribution(
    time_range: Optional[str] = Query(None, alias="range", description="1M, 3M, 6M, 1Y or ALL"),
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Training volume share per body part."""
    return await service.get_body_part_distribution(time_range)


@router.get("/heatmap", response_model=HeatMapData)
async def heat_map(
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Daily training intensity over the last twelve weeks."""
    return await service.get_heat_map_data()


@router.get("/prs/timeline", response_model=List[PRTimelineItem])
async def pr_timeline(
    limit: Optional[int] = Query(None, ge=1, le=100),
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Significant personal records, newest first."""
    return await service.get_pr_timeline(limit)


# ============================================================================
# Invalidation
# ============================================================================

@router.post("/cache/clear")
async def clear_cache(
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Drop the cached progress map."""
    service.clear_progress_cache()
    return {"success": True, "message": "Progress cache cleared"}


@router.post("/workouts/completed")
async def workout_completed(
    service: ExerciseProgressService = Depends(get_progress_service),
):
    """Signal a newly completed workout so progress and PRs are rebuilt on next read."""
    await service.on_workout_completed()
    return {"success": True, "message": "Progress will be rebuilt on next read"}
