"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Upstream base URL comes from the environment, never hardcoded at call sites
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults target the local mock employee server: works out-of-the-box in development
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream employee API
    employee_api_base_url: str = "http://localhost:8112/api/v1/employee"
    http_timeout_seconds: float = 30.0

    @field_validator("employee_api_base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("employee_api_base_url cannot be empty")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
