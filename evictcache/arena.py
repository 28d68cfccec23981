"""Slot storage for cache entries.

Entries live in a flat list and are addressed by their integer slot. Links
between entries (recency neighbours, owning frequency bucket) are stored as
slot numbers, so the ordering structures never hold references to each
other's objects and a slot stays valid until it is released.
"""

from typing import Any, Hashable, List, Optional

# Marks the absence of a neighbour slot.
NIL = -1


class Entry:
    """One stored key/value pair plus ordering metadata."""

    __slots__ = ("key", "value", "prev", "next", "frequency")

    def __init__(self, key: Hashable, value: Any):
        self.key = key
        self.value = value
        self.prev = NIL
        self.next = NIL
        self.frequency = 1

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, frequency={self.frequency})"


class EntryArena:
    """Owns every Entry of a cache and hands out stable slot numbers."""

    def __init__(self):
        self._slots: List[Optional[Entry]] = []
        self._free: List[int] = []

    def allocate(self, key: Hashable, value: Any) -> int:
        """
        Store a new entry and return its slot.

        Freed slots are reused before the arena grows.

        Args:
            key: The entry key
            value: The entry value

        Returns:
            The slot number of the new entry
        """
        entry = Entry(key, value)
        if self._free:
            slot = self._free.pop()
            self._slots[slot] = entry
        else:
            slot = len(self._slots)
            self._slots.append(entry)
        return slot

    def release(self, slot: int) -> Entry:
        """
        Free a slot and return the entry that occupied it.

        Args:
            slot: The slot to free

        Returns:
            The entry that was stored in the slot
        """
        entry = self[slot]
        self._slots[slot] = None
        self._free.append(slot)
        return entry

    def __getitem__(self, slot: int) -> Entry:
        entry = self._slots[slot] if 0 <= slot < len(self._slots) else None
        if entry is None:
            raise IndexError(f"arena slot {slot} is not allocated")
        return entry

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def clear(self) -> None:
        """Drop every entry and forget all slots."""
        self._slots.clear()
        self._free.clear()
