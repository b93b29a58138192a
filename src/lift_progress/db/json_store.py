"""
JSON file record store.

Layout under the data directory:

    exercises.json              exercise catalog (list of entries)
    <user_id>/workouts.json     workout documents of one user (list)

Files are read in a worker thread so the event loop is never blocked.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Union

from .documents import completed_in_order, dated_from, parse_catalog, parse_workouts
from ..exceptions import CatalogError, RecordSourceError
from ..models import CatalogExercise, WorkoutRecord

logger = logging.getLogger(__name__)


WORKOUTS_FILE = "workouts.json"
CATALOG_FILE = "exercises.json"


def _read_json_list(path: Path) -> List[Any]:
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        # Keyed by document id
        return list(data.values())
    if not isinstance(data, list):
        raise ValueError(f"expected a list of documents, got {type(data).__name__}")
    return data


class JsonRecordStore:
    """RecordSource and ExerciseCatalog backed by JSON files."""

    def __init__(self, data_dir: Union[str, Path]) -> None:
        self.data_dir = Path(data_dir)

    def workouts_path(self, user_id: str) -> Path:
        return self.data_dir / user_id / WORKOUTS_FILE

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / CATALOG_FILE

    async def _load_workouts(self, user_id: str) -> List[WorkoutRecord]:
        path = self.workouts_path(user_id)
        if not path.exists():
            logger.info(f"No workouts file for user {user_id!r} at {path}")
            return []
        try:
            documents = await asyncio.to_thread(_read_json_list, path)
        except (OSError, ValueError) as e:
            raise RecordSourceError(f"Cannot read workouts from {path}: {e}", user_id=user_id) from e
        return parse_workouts(documents)

    async def get_completed_workouts(self, user_id: str) -> List[WorkoutRecord]:
        """Completed workouts, ascending by completion time."""
        return completed_in_order(await self._load_workouts(user_id))

    async def get_workouts_in_date_range(self, user_id: str, from_date: str) -> List[WorkoutRecord]:
        """Workouts dated on or after ``from_date``, ascending by date."""
        return dated_from(await self._load_workouts(user_id), from_date)

    async def list_exercises(self) -> List[CatalogExercise]:
        """Exercise catalog entries; empty when no catalog file exists."""
        path = self.catalog_path
        if not path.exists():
            return []
        try:
            documents = await asyncio.to_thread(_read_json_list, path)
        except (OSError, ValueError) as e:
            raise CatalogError(f"Cannot read exercise catalog from {path}: {e}") from e
        return parse_catalog(documents)
