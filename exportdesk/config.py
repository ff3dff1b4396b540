import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_FILTER_STRATEGIES = frozenset({"client", "server"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Export Desk"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Operations backend
    api_base_url: str = "http://localhost:8080/api"
    api_token: str = ""
    token_file: str = "data/session.json"
    request_timeout: float = 30.0

    # Screens
    page_size: int = 10
    filter_strategy: str = "client"          # "client" | "server", same for every screen
    catalog_file: str = ""                   # empty → packaged resources.yaml

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore outbound requests
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_gateway: str = "INFO"          # backend gateway requests
    log_level_screens: str = "INFO"          # list controllers + notifications

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Fall back to client-side filtering on an unknown strategy name."""
        if self.filter_strategy not in _FILTER_STRATEGIES:
            _config_logger.warning(
                "Unknown filter_strategy %r, using 'client'", self.filter_strategy
            )
            object.__setattr__(self, "filter_strategy", "client")
        if self.page_size < 1:
            _config_logger.warning("page_size must be positive, using 10")
            object.__setattr__(self, "page_size", 10)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
