"""SDK Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (api_token) come from environment variables, never hardcoded
    - get_settings() is cached (lru_cache), so there is a single instance per process
    - api_base_url always ends in /api/v2 and carries the organization host prefix when set

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - CROWDIN_ prefix: settings can live next to an application's own environment
"""

from functools import lru_cache
from urllib.parse import urlsplit, urlunsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


API_PATH = "/api/v2"


class Settings(BaseSettings):
    """SDK settings from CROWDIN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CROWDIN_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Auth
    api_token: str = ""
    organization: str | None = None

    @field_validator("organization", mode="before")
    @classmethod
    def blank_organization_is_none(cls, v: str | None) -> str | None:
        """An empty CROWDIN_ORGANIZATION means crowdin.com, not Enterprise."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    # Transport
    base_url: str = "https://api.crowdin.com/"
    user_agent: str = "crowdin-sdk-python/0.1.0"
    timeout_seconds: int = 30

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_enterprise(self) -> bool:
        return self.organization is not None

    @property
    def api_base_url(self) -> str:
        """Resolved REST root, e.g. https://acme.api.crowdin.com/api/v2."""
        parts = urlsplit(self.base_url)
        host = parts.netloc
        if self.organization:
            host = f"{self.organization}.{host}"
        return urlunsplit((parts.scheme, host, API_PATH, "", ""))


@lru_cache
def get_settings() -> Settings:
    return Settings()
