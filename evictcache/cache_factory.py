"""Factory for creating cache instances based on eviction policy."""

from typing import Any, Optional, Union

import structlog

from evictcache.base import BaseCache
from evictcache.config import get_settings
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.eviction_policy.lfu_cache import LFUCache
from evictcache.eviction_policy.lru_cache import LRUCache
from evictcache.exceptions import InvalidCapacityError, InvalidEvictionPolicyError
from evictcache.models import EvictionCallback

logger = structlog.get_logger()

# Process-wide cache instance
_cache_instance: Optional[BaseCache] = None


def create_cache(
    eviction_policy: Union[EvictionPolicy, str],
    capacity: int,
    eviction_callback: Optional[EvictionCallback] = None,
    user_context: Any = None,
    log_evictions: bool = False,
) -> BaseCache:
    """
    Create a cache instance based on the specified eviction policy.

    Args:
        eviction_policy: The eviction policy to use (LRU or LFU)
        capacity: Maximum number of keys the cache can hold
        eviction_callback: Optional function called with (key, value, user_context)
        user_context: Opaque value passed to every callback invocation
        log_evictions: Emit a debug event for every entry handed to the callback

    Returns:
        A cache instance implementing the BaseCache interface

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported
        InvalidCapacityError: If capacity is invalid
    """
    # Validate capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidCapacityError(capacity)

    # Normalize eviction policy
    if isinstance(eviction_policy, str) and not isinstance(eviction_policy, EvictionPolicy):
        eviction_policy = eviction_policy.upper()
        try:
            eviction_policy = EvictionPolicy(eviction_policy)
        except ValueError:
            raise InvalidEvictionPolicyError(eviction_policy)

    # Create appropriate cache instance
    if eviction_policy == EvictionPolicy.LRU:
        return LRUCache(capacity, eviction_callback, user_context, log_evictions)
    elif eviction_policy == EvictionPolicy.LFU:
        return LFUCache(capacity, eviction_callback, user_context, log_evictions)
    else:
        raise InvalidEvictionPolicyError(str(eviction_policy))


def get_in_memory_cache() -> BaseCache:
    """
    Get the process-wide in-memory cache instance.

    On first call, builds the cache from the configured default policy and
    capacity (``EVICTCACHE_DEFAULT_POLICY`` / ``EVICTCACHE_DEFAULT_CAPACITY``).
    Subsequent calls return the same instance. No locking is done; call this
    once during start-up if several threads will share the cache.

    Example:
        cache = get_in_memory_cache()
        cache.set("user:42", profile)
    """
    global _cache_instance

    if _cache_instance is None:
        settings = get_settings()
        _cache_instance = create_cache(
            settings.default_policy,
            settings.default_capacity,
            log_evictions=settings.log_evictions,
        )
        logger.info(
            "Shared cache initialized",
            policy=settings.default_policy.value,
            capacity=settings.default_capacity
        )

    return _cache_instance


def reset_in_memory_cache() -> None:
    """
    Tear down the process-wide cache, if any, and forget it.

    If the eviction callback raises during teardown the instance stays
    registered, so the entries not yet released can be retried by calling
    this again.
    """
    global _cache_instance

    if _cache_instance is None:
        return

    _cache_instance.close()
    _cache_instance = None
    logger.info("Shared cache reset")
