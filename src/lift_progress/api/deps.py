"""Dependency injection for API routes."""

from functools import lru_cache
from typing import Optional, Union

from ..config import get_settings
from ..db.json_store import JsonRecordStore
from ..integrations.record_store import HttpRecordStore
from ..services.pr_tracker import PersonalRecordTracker
from ..services.progress_service import ExerciseProgressService


def get_current_user_id() -> Optional[str]:
    """Signed-in user from settings; None means signed out."""
    return get_settings().user_id


@lru_cache
def get_record_store() -> Union[JsonRecordStore, HttpRecordStore]:
    """Get the record store; an HTTP store URL takes precedence over the data directory."""
    settings = get_settings()
    if settings.record_store_url:
        return HttpRecordStore(settings.record_store_url, timeout=settings.record_store_timeout)
    return JsonRecordStore(settings.data_dir)


@lru_cache
def get_pr_tracker() -> PersonalRecordTracker:
    """Get the personal-record tracker instance."""
    store = get_record_store()
    return PersonalRecordTracker(
        record_source=store,
        catalog=store,
        user_provider=get_current_user_id,
        cutoff_date=get_settings().pr_cutoff_date,
    )


@lru_cache
def get_progress_service() -> ExerciseProgressService:
    """Get the exercise progress service instance."""
    store = get_record_store()
    return ExerciseProgressService(
        record_source=store,
        catalog=store,
        pr_tracker=get_pr_tracker(),
        user_provider=get_current_user_id,
        settings=get_settings(),
    )
