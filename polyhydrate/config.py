"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Explicit Hydrator/TypeRegistry arguments always win over settings

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults keep the permissive behavior: unbound keys are dropped, not rejected
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings from POLYHYDRATE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLYHYDRATE_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Hydration
    strict_keys: bool = False
    namespace_separator: str = "."

    @field_validator("namespace_separator")
    @classmethod
    def require_separator(cls, v: str) -> str:
        if not v:
            raise ValueError("namespace_separator cannot be empty")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
