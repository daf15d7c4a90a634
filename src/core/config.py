"""
Application Configuration
Central settings for the id-server admin caller
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from functools import lru_cache


DEV_ENVIRONMENT = "dev"
DEV_ID_SERVER_URL = "http://localhost:3000"
PROD_ID_SERVER_URL = "https://id-server.holonym.io"

DEFAULT_INTERVAL_SECONDS = 600


def get_id_server_url(environment: Optional[str]) -> str:
    """
    Base URL of the id-server for a given ENVIRONMENT value.
    Only the exact string "dev" selects the local server.
    """
    if environment == DEV_ENVIRONMENT:
        return DEV_ID_SERVER_URL
    return PROD_ID_SERVER_URL


class Settings(BaseSettings):
    """Main settings, resolved once at startup"""

    # === Application ===
    environment: str = Field(..., alias="ENVIRONMENT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", alias="LOG_LEVEL"
    )

    # === id-server Admin ===
    admin_api_key: str = Field(..., alias="ADMIN_API_KEY")

    # === Scheduler ===
    interval_seconds: float = Field(
        default=DEFAULT_INTERVAL_SECONDS, gt=0, alias="ADMIN_CALLER_INTERVAL_SECONDS"
    )

    class Config:
        env_file = ".env"
        extra = "ignore"
        frozen = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def id_server_url(self) -> str:
        return get_id_server_url(self.environment)


def load_settings(**kwargs) -> Settings:
    """Build a fresh Settings; raises pydantic.ValidationError when a required variable is missing"""
    return Settings(**kwargs)


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
