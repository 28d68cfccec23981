"""In-memory cache with LRU and LFU eviction policies."""

from evictcache.base import MISSING, BaseCache
from evictcache.cache_factory import create_cache, get_in_memory_cache, reset_in_memory_cache
from evictcache.config import Settings, get_settings
from evictcache.eviction_policy.eviction_policy import EvictionPolicy, EvictionReason
from evictcache.eviction_policy.lfu_cache import LFUCache
from evictcache.eviction_policy.lru_cache import LRUCache
from evictcache.exceptions import (
    CacheError,
    CacheReentrancyError,
    InvalidCapacityError,
    InvalidEvictionPolicyError,
    KeyNotFoundError
)
from evictcache.models import CacheConfig, CacheStats
from evictcache.utils.logging import configure_logging

__all__ = [
    "MISSING",
    "BaseCache",
    "LRUCache",
    "LFUCache",
    "EvictionPolicy",
    "EvictionReason",
    "create_cache",
    "get_in_memory_cache",
    "reset_in_memory_cache",
    "CacheConfig",
    "CacheStats",
    "Settings",
    "get_settings",
    "configure_logging",
    "CacheError",
    "CacheReentrancyError",
    "InvalidCapacityError",
    "InvalidEvictionPolicyError",
    "KeyNotFoundError",
]
