"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings come from BAGSTORE_* environment variables or .env
    - base_uri always ends with '/'
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box in tests and locally
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BAGSTORE_", env_file=".env", case_sensitive=False,
    )

    # Location under which item-ids are published
    base_uri: str = "http://localhost/"

    @field_validator("base_uri", mode="before")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Item-ids are appended directly, so the base must end in '/'."""
        if isinstance(v, str) and not v.endswith("/"):
            return v + "/"
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
