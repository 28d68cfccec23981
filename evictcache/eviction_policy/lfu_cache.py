"""LFU (Least Frequently Used) cache implementation."""

from typing import Any, Hashable, Iterator, Optional

from evictcache.base import BaseCache
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.eviction_policy.frequency_ledger import FrequencyLedger
from evictcache.exceptions import KeyNotFoundError
from evictcache.models import EvictionCallback


class LFUCache(BaseCache):
    """
    LFU (Least Frequently Used) cache implementation.

    Uses a hash map for O(1) key lookup and frequency buckets with
    doubly linked lists to maintain frequency order for O(1) eviction.
    Every get and every set on an existing key counts as one access.
    Ties between entries of the lowest frequency are broken by evicting
    the least recently used of them.
    """

    policy = EvictionPolicy.LFU

    def __init__(
        self,
        capacity: int,
        eviction_callback: Optional[EvictionCallback] = None,
        user_context: Any = None,
        log_evictions: bool = False,
    ):
        super().__init__(capacity, eviction_callback, user_context, log_evictions)
        self._ledger = FrequencyLedger(self._arena)

    @property
    def min_frequency(self) -> Optional[int]:
        """Lowest access count among live entries, or None when empty."""
        return self._ledger.min_frequency

    def frequency(self, key: Hashable) -> int:
        """
        Get the access count of a key without counting an access.

        Args:
            key: The key to look up

        Returns:
            The number of gets and sets the entry has seen since insertion

        Raises:
            KeyNotFoundError: If the key is absent
        """
        slot = self._index.lookup(key)
        if slot is None:
            raise KeyNotFoundError(key)
        return self._arena[slot].frequency

    def _on_insert(self, slot: int) -> None:
        self._ledger.insert(slot)

    def _on_access(self, slot: int) -> None:
        self._ledger.touch(slot)

    def _unlink(self, slot: int) -> None:
        self._ledger.unlink(slot)

    def _pop_victim(self) -> Optional[int]:
        return self._ledger.pop_victim()

    def _victim_order(self) -> Iterator[int]:
        return iter(self._ledger)

    def _clear_order(self) -> None:
        self._ledger.clear()
