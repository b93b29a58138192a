"""
HTTP record store client.

Reads workout documents and the exercise catalog from a remote store:

    GET {base_url}/users/{user_id}/workouts            completed workouts
    GET {base_url}/users/{user_id}/workouts?from=DATE  workouts from DATE on
    GET {base_url}/exercises                           exercise catalog

Responses are JSON lists of documents. The ordering contract is re-applied
locally, so the server does not have to sort.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..db.documents import completed_in_order, dated_from, parse_catalog, parse_workouts
from ..exceptions import CatalogError, RecordSourceError
from ..models import CatalogExercise, WorkoutRecord

logger = logging.getLogger(__name__)


class HttpRecordStore:
    """
    RecordSource and ExerciseCatalog over HTTP.

    Usage:
        async with HttpRecordStore("https://records.example.com/api") as store:
            records = await store.get_completed_workouts("user-1")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "HttpRecordStore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_documents(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        GET an endpoint returning a list of documents.

        Raises:
            httpx.HTTPError: On transport failures and non-2xx responses
            ValueError: If the body is not a JSON list
        """
        client = await self._get_client()
        response = await client.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, list):
            raise ValueError(f"expected a list of documents from {endpoint}")
        return data

    async def _get_workouts(self, user_id: str, params: Optional[Dict[str, Any]] = None) -> List[WorkoutRecord]:
        endpoint = f"/users/{user_id}/workouts"
        try:
            documents = await self._get_documents(endpoint, params)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Record store request {endpoint} failed: {e}")
            raise RecordSourceError(f"Failed to fetch workouts: {e}", user_id=user_id) from e
        return parse_workouts(documents)

    async def get_completed_workouts(self, user_id: str) -> List[WorkoutRecord]:
        """Completed workouts, ascending by completion time."""
        return completed_in_order(await self._get_workouts(user_id))

    async def get_workouts_in_date_range(self, user_id: str, from_date: str) -> List[WorkoutRecord]:
        """Workouts dated on or after ``from_date``, ascending by date."""
        return dated_from(await self._get_workouts(user_id, {"from": from_date}), from_date)

    async def list_exercises(self) -> List[CatalogExercise]:
        try:
            documents = await self._get_documents("/exercises")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Exercise catalog request failed: {e}")
            raise CatalogError(f"Failed to fetch exercise catalog: {e}") from e
        return parse_catalog(documents)
