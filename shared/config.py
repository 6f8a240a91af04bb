"""
Shared configuration management for the eTIMS integration layer.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class EtimsSettings(BaseSettings):
    """Settings loaded from ``ETIMS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ETIMS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: str = "development"
    log_level: str = "info"

    # Remote API
    dev_api_base_url: str = "https://etims-api-sbx.kra.go.ke"
    prod_api_base_url: str = "https://etims-api.kra.go.ke/etims-api"
    api_username: Optional[str] = None
    api_password: Optional[str] = None
    request_timeout_seconds: float = 30.0
    token_refresh_skew_seconds: float = 300.0

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS (comma separated lists)
    cors_allowed_origins: str = "*"
    cors_allowed_methods: str = "GET,POST,OPTIONS"
    cors_allowed_headers: str = "Content-Type,Authorization"
    cors_exposed_headers: str = ""
    cors_allow_credentials: bool = False
    cors_max_age: int = 600

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def api_base_url(self) -> str:
        """Base URL of the remote API for the active environment."""
        url = self.prod_api_base_url if self.is_production else self.dev_api_base_url
        return url.rstrip("/")

    @property
    def cors_origins(self) -> List[str]:
        return _split_csv(self.cors_allowed_origins)

    @property
    def cors_methods(self) -> List[str]:
        return _split_csv(self.cors_allowed_methods)

    @property
    def cors_headers(self) -> List[str]:
        return _split_csv(self.cors_allowed_headers)

    @property
    def cors_expose_headers(self) -> List[str]:
        return _split_csv(self.cors_exposed_headers)


@lru_cache(maxsize=1)
def get_settings() -> EtimsSettings:
    """Load settings once per process."""
    return EtimsSettings()
