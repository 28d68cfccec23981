"""Key to slot index for cache entries."""

from typing import Dict, Hashable, Iterator, Optional


class KeyIndex:
    """
    Hash map from key to the arena slot holding its entry.

    Owns no entries; it only records which keys are live and where they are.
    """

    def __init__(self):
        self._slots: Dict[Hashable, int] = {}

    def lookup(self, key: Hashable) -> Optional[int]:
        """Return the slot for a key, or None if the key is not live."""
        return self._slots.get(key)

    def insert(self, key: Hashable, slot: int) -> None:
        self._slots[key] = slot

    def remove(self, key: Hashable) -> Optional[int]:
        """Forget a key and return the slot it pointed to, if any."""
        return self._slots.pop(key, None)

    def clear(self) -> None:
        self._slots.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._slots)
