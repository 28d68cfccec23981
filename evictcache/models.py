"""Pydantic models for cache configuration and statistics."""

from typing import Any, Callable, Hashable, Optional

from pydantic import BaseModel, ConfigDict, Field

EvictionCallback = Callable[[Hashable, Any, Any], None]


class CacheConfig(BaseModel):
    """Construction configuration for a cache instance."""

    # Positivity is checked by BaseCache.__init__ (InvalidCapacityError)
    capacity: int = Field(..., description="Maximum number of entries the cache can hold")
    eviction_callback: Optional[EvictionCallback] = Field(
        default=None,
        description="Called with (key, value, user_context) when an entry is evicted, overwritten or torn down",
    )
    user_context: Any = Field(
        default=None,
        description="Opaque value passed through unmodified to every callback invocation",
    )
    log_evictions: bool = Field(
        default=False,
        description="Emit a debug event for every entry handed to the eviction callback",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)


class CacheStats(BaseModel):
    """Point-in-time counters for a cache instance."""

    capacity: int = Field(..., gt=0, description="Configured capacity")
    size: int = Field(..., ge=0, description="Number of live entries")
    hits: int = Field(default=0, ge=0, description="Lookups that found their key")
    misses: int = Field(default=0, ge=0, description="Lookups that did not find their key")
    inserts: int = Field(default=0, ge=0, description="Entries created by set on a new key")
    overwrites: int = Field(default=0, ge=0, description="Values replaced by set on an existing key")
    evictions: int = Field(default=0, ge=0, description="Entries removed by capacity pressure")
    removals: int = Field(default=0, ge=0, description="Entries removed by remove or clear")
    teardown_releases: int = Field(default=0, ge=0, description="Entries handed back by close")

    @property
    def hit_ratio(self) -> float:
        """Fraction of lookups that were hits, 0.0 before the first lookup."""
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0
