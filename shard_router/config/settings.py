# shard_router/config/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RouterSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHARD_ROUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Index ---
    index_name: str = Field(..., min_length=1)

    # --- Routing keys ---
    key_prefix: str = ""
    key_suffix: str = ""
    max_synthesis_attempts: int = Field(10_000, ge=1)

    # --- Store ---
    elasticsearch_url: str = "http://localhost:9200"
    elasticsearch_username: Optional[str] = None
    elasticsearch_password: Optional[str] = None
    request_timeout_seconds: float = Field(10.0, gt=0)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> RouterSettings:
    return RouterSettings()
