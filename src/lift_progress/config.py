"""Configuration settings for the Lift Progress engine."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# Path calculations:
# __file__ = src/lift_progress/config.py
# .parent.parent.parent = project root
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LIFT_PROGRESS_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Record store
    data_dir: Optional[Path] = None
    record_store_url: Optional[str] = None
    record_store_timeout: float = 10.0

    # Signed-in user; None means no authenticated context
    user_id: Optional[str] = None

    # Engine tuning
    cache_ttl_seconds: int = 300
    heat_map_window_days: int = 84
    pr_timeline_limit: int = 10
    significant_pr_min_reps: int = 5
    pr_cutoff_date: str = "2024-11-30"
    distribution_time_range: str = "3M"

    def model_post_init(self, __context) -> None:
        """Set default data directory after initialization."""
        if self.data_dir is None:
            self.data_dir = PROJECT_ROOT / "data"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
