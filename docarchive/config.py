import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
# Keys an operator may override at runtime through data/settings.json
_RUNTIME_KEYS = {
    "template_delete_policy": lambda v: v in ("orphan", "restrict", "cascade"),
    "strict_archive_requests": lambda v: isinstance(v, bool),
}

TemplateDeletePolicy = Literal["orphan", "restrict", "cascade"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Document Archive API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./docarchive.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:5000"]

    # What happens to documents when their template is deleted:
    #   orphan   — documents are kept with a stale template id
    #   restrict — deletion is refused while documents reference the template
    #   cascade  — referencing documents are deleted with the template
    template_delete_policy: TemplateDeletePolicy = "orphan"

    # Enforce the archiving form contract (title, version type, cabinet,
    # shelf) on POST /api/archive/{id}. The stored shape stays lenient.
    strict_archive_requests: bool = False

    # Insert the sample marriage-contract template into an empty database
    seed_sample_template: bool = True

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # docarchive.application.services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime overrides from data/settings.json into the settings."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key, accepts in _RUNTIME_KEYS.items():
                    if key in overrides and accepts(overrides[key]):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
