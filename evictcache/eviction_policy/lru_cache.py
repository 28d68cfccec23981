"""LRU (Least Recently Used) cache implementation."""

from typing import Any, Iterator, Optional

from evictcache.base import BaseCache
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.eviction_policy.recency_list import RecencyList
from evictcache.models import EvictionCallback


class LRUCache(BaseCache):
    """
    LRU (Least Recently Used) cache implementation.

    Uses a hash map for O(1) key lookup and a doubly linked list
    to maintain access order for O(1) eviction.
    """

    policy = EvictionPolicy.LRU

    def __init__(
        self,
        capacity: int,
        eviction_callback: Optional[EvictionCallback] = None,
        user_context: Any = None,
        log_evictions: bool = False,
    ):
        super().__init__(capacity, eviction_callback, user_context, log_evictions)
        self._recency = RecencyList(self._arena)

    def _on_insert(self, slot: int) -> None:
        self._recency.push_front(slot)

    def _on_access(self, slot: int) -> None:
        # Move to head (most recently used)
        self._recency.move_to_front(slot)

    def _unlink(self, slot: int) -> None:
        self._recency.unlink(slot)

    def _pop_victim(self) -> Optional[int]:
        return self._recency.pop_tail()

    def _victim_order(self) -> Iterator[int]:
        return self._recency.victim_order()

    def _clear_order(self) -> None:
        self._recency.clear()
