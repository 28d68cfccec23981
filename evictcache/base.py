"""Base cache facade shared by the LRU and LFU implementations."""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, List, Optional

import structlog

from evictcache.arena import EntryArena
from evictcache.eviction_policy.eviction_policy import EvictionPolicy, EvictionReason
from evictcache.exceptions import CacheReentrancyError, InvalidCapacityError, KeyNotFoundError
from evictcache.key_index import KeyIndex
from evictcache.models import CacheConfig, CacheStats, EvictionCallback

logger = structlog.get_logger()

MISSING: Any = object()


class BaseCache(ABC):
    """
    Fixed-capacity key/value cache.

    Subclasses provide the ordering structure through the ``_on_insert``,
    ``_on_access``, ``_unlink``, ``_pop_victim`` and ``_victim_order`` hooks;
    this class keeps the key index, entry storage, capacity and eviction
    callback consistent with it.

    The cache does no locking. Callers sharing an instance between threads
    must wrap every call, ``get`` included, in their own lock.

    The eviction callback receives ``(key, value, user_context)`` when an
    entry is evicted for capacity, when its value is overwritten by ``set``
    and when the cache is torn down by ``close``. It must not call back into
    the same cache; doing so raises ``CacheReentrancyError``.
    """

    policy: EvictionPolicy

    def __init__(
        self,
        capacity: int,
        eviction_callback: Optional[EvictionCallback] = None,
        user_context: Any = None,
        log_evictions: bool = False,
    ):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of keys the cache can hold
            eviction_callback: Optional function called with (key, value, user_context)
            user_context: Opaque value passed to every callback invocation
            log_evictions: Emit a debug event for every entry handed to the callback

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)

        self._capacity = capacity
        self._eviction_callback = eviction_callback
        self._user_context = user_context
        self._arena = EntryArena()
        self._index = KeyIndex()
        self._in_callback = False
        self._log_evictions = log_evictions

        self._hits = 0
        self._misses = 0
        self._inserts = 0
        self._overwrites = 0
        self._evictions = 0
        self._removals = 0
        self._teardown_releases = 0

        logger.info(
            "Cache created",
            policy=self.policy.value,
            capacity=capacity,
            has_eviction_callback=eviction_callback is not None
        )

    @classmethod
    def from_config(cls, config: CacheConfig) -> "BaseCache":
        """
        Build a cache from a construction configuration.

        Raises:
            InvalidCapacityError: If the configured capacity is not positive
        """
        return cls(
            config.capacity,
            eviction_callback=config.eviction_callback,
            user_context=config.user_context,
            log_evictions=config.log_evictions,
        )

    @property
    def capacity(self) -> int:
        """Get the maximum number of keys the cache can hold."""
        return self._capacity

    @property
    def size(self) -> int:
        """Get the current number of keys in the cache."""
        return len(self._index)

    @property
    def stats(self) -> CacheStats:
        return CacheStats(
            capacity=self._capacity,
            size=len(self._index),
            hits=self._hits,
            misses=self._misses,
            inserts=self._inserts,
            overwrites=self._overwrites,
            evictions=self._evictions,
            removals=self._removals,
            teardown_releases=self._teardown_releases,
        )

    def get(self, key: Hashable, default: Any = MISSING) -> Any:
        """
        Get a value from the cache by key and mark it as accessed.

        Args:
            key: The key to look up
            default: Value returned instead of raising when the key is absent

        Returns:
            The value associated with the key

        Raises:
            KeyNotFoundError: If the key is absent and no default was given
        """
        self._check_reentrancy("get")
        slot = self._index.lookup(key)
        if slot is None:
            self._misses += 1
            if default is MISSING:
                raise KeyNotFoundError(key)
            return default

        self._hits += 1
        self._on_access(slot)
        return self._arena[slot].value

    def set(self, key: Hashable, value: Any) -> None:
        """
        Set a key-value pair in the cache.

        If the key exists, the old value is handed to the eviction callback,
        replaced, and the entry is marked as accessed. Otherwise, if the cache
        is full, the policy's victim is evicted (and handed to the callback)
        before the new entry is inserted.

        Args:
            key: The key to store
            value: The value to store
        """
        self._check_reentrancy("set")
        slot = self._index.lookup(key)
        if slot is not None:
            entry = self._arena[slot]
            self._notify(key, entry.value, EvictionReason.OVERWRITE)
            entry.value = value
            self._overwrites += 1
            self._on_access(slot)
            return

        if len(self._index) >= self._capacity:
            self._evict()

        slot = self._arena.allocate(key, value)
        self._index.insert(key, slot)
        self._on_insert(slot)
        self._inserts += 1

    def remove(self, key: Hashable) -> bool:
        """
        Remove a key from the cache without invoking the eviction callback.

        Args:
            key: The key to remove

        Returns:
            True if the key was present
        """
        self._check_reentrancy("remove")
        slot = self._index.remove(key)
        if slot is None:
            return False

        self._unlink(slot)
        self._arena.release(slot)
        self._removals += 1
        return True

    def contains(self, key: Hashable) -> bool:
        """Check whether a key is live, without marking it as accessed."""
        return key in self._index

    def peek(self, key: Hashable, default: Any = MISSING) -> Any:
        """
        Get a value without marking it as accessed.

        Raises:
            KeyNotFoundError: If the key is absent and no default was given
        """
        self._check_reentrancy("peek")
        slot = self._index.lookup(key)
        if slot is None:
            if default is MISSING:
                raise KeyNotFoundError(key)
            return default
        return self._arena[slot].value

    def keys(self) -> List[Hashable]:
        """Live keys in eviction order, next victim first."""
        return [self._arena[slot].key for slot in self._victim_order()]

    def clear(self) -> None:
        """Drop all entries without invoking the eviction callback."""
        self._check_reentrancy("clear")
        self._removals += len(self._index)
        self._index.clear()
        self._arena.clear()
        self._clear_order()

    def close(self) -> None:
        """
        Tear down the cache, handing every live entry to the eviction callback.

        Entries are released in eviction order. The cache is empty and still
        usable afterwards. If the callback raises, the entries not yet
        released stay in the cache.
        """
        self._check_reentrancy("close")
        released = 0
        while True:
            slot = self._pop_victim()
            if slot is None:
                break
            entry = self._arena.release(slot)
            self._index.remove(entry.key)
            self._teardown_releases += 1
            released += 1
            self._notify(entry.key, entry.value, EvictionReason.TEARDOWN)

        logger.info("Cache closed", policy=self.policy.value, released=released)

    def __enter__(self) -> "BaseCache":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._index)})"

    def _evict(self) -> None:
        """Evict the policy's victim and hand it to the callback."""
        slot = self._pop_victim()
        if slot is None:
            return

        entry = self._arena.release(slot)
        self._index.remove(entry.key)
        self._evictions += 1
        self._notify(entry.key, entry.value, EvictionReason.CAPACITY)

    def _notify(self, key: Hashable, value: Any, reason: EvictionReason) -> None:
        if self._log_evictions:
            logger.debug(
                "Cache entry released",
                policy=self.policy.value,
                key=repr(key),
                reason=reason.value
            )

        if self._eviction_callback is None:
            return

        self._in_callback = True
        try:
            self._eviction_callback(key, value, self._user_context)
        except Exception as e:
            logger.error(
                "Eviction callback failed",
                function="_notify",
                policy=self.policy.value,
                key=repr(key),
                reason=reason.value,
                error=str(e),
                error_type=type(e).__name__
            )
            raise
        finally:
            self._in_callback = False

    def _check_reentrancy(self, operation: str) -> None:
        if self._in_callback:
            raise CacheReentrancyError(operation)

    @abstractmethod
    def _on_insert(self, slot: int) -> None:
        """Place a new entry at the policy's freshest position."""

    @abstractmethod
    def _on_access(self, slot: int) -> None:
        """Reposition a live entry after a hit or an overwrite."""

    @abstractmethod
    def _unlink(self, slot: int) -> None:
        """Remove a live entry from the ordering structure."""

    @abstractmethod
    def _pop_victim(self) -> Optional[int]:
        """Unlink and return the policy's victim, or None if empty."""

    @abstractmethod
    def _victim_order(self) -> Iterator[int]:
        """Yield live slots in eviction order."""

    @abstractmethod
    def _clear_order(self) -> None:
        """Reset the ordering structure to empty."""
