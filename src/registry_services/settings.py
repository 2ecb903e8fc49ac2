"""
registry_services.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for both services.
- Offer a cached settings instance for the entrypoint and dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    One settings object covers both services; `service` picks which app the
    entrypoint serves.
    """

    model_config = SettingsConfigDict(env_prefix="REGISTRY_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service: Literal["orders", "users"] = "orders"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    order_api_port: int = 8081
    user_api_port: int = 8080

    # Sibling registry used to enrich single-order reads.
    user_service_base_url: str = "http://user-service:8080"
    user_lookup_timeout_seconds: float = Field(default=5.0, gt=0)

    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Stores start with two fixture records each unless disabled.
    seed_fixtures: bool = True

    @property
    def api_port(self) -> int:
        return self.order_api_port if self.service == "orders" else self.user_api_port


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# App factories take a Settings instance explicitly so tests can build isolated apps.
