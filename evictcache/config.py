"""Configuration management for the cache library."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from evictcache.eviction_policy.eviction_policy import EvictionPolicy


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVICTCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )

    # Process-wide cache defaults
    default_policy: EvictionPolicy = Field(default=EvictionPolicy.LRU, description="Eviction policy of the shared cache")
    default_capacity: int = Field(default=1000, gt=0, description="Capacity of the shared cache")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_evictions: bool = Field(default=False, description="Emit a debug event for every entry handed to an eviction callback")

    @field_validator("default_policy", mode="before")
    @classmethod
    def normalize_policy(cls, value):
        """Accept policy names in any case."""
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings instance, reading the environment on first use."""
    return Settings()
