"""Recency ordering for the LRU policy."""

from typing import Iterator, Optional

from evictcache.arena import NIL, EntryArena
from evictcache.eviction_policy.linked_list import DoublyLinkedList


class RecencyList:
    """
    Entries ordered by last access.

    Head is the most recently used entry, tail the least recently used one
    and therefore the eviction victim.
    """

    def __init__(self, arena: EntryArena):
        self._list = DoublyLinkedList(arena)

    def push_front(self, slot: int) -> None:
        """Insert a new entry as the most recently used."""
        self._list.add_to_head(slot)

    def move_to_front(self, slot: int) -> None:
        """Mark a live entry as just used."""
        if self._list.head == slot:
            return
        self._list.remove_node(slot)
        self._list.add_to_head(slot)

    def unlink(self, slot: int) -> None:
        self._list.remove_node(slot)

    @property
    def head(self) -> Optional[int]:
        return None if self._list.head == NIL else self._list.head

    @property
    def tail(self) -> Optional[int]:
        return None if self._list.tail == NIL else self._list.tail

    def pop_tail(self) -> Optional[int]:
        """Unlink and return the least recently used slot, or None if empty."""
        slot = self._list.remove_tail()
        return None if slot == NIL else slot

    def clear(self) -> None:
        self._list.clear()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[int]:
        """Yield slots from most to least recently used."""
        return iter(self._list)

    def victim_order(self) -> Iterator[int]:
        """Yield slots in the order they would be evicted."""
        return self._list.iter_from_tail()
