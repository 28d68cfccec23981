"""Frequency buckets for the LFU policy."""

from typing import Dict, Iterator, List, Optional

from evictcache.arena import NIL, EntryArena
from evictcache.eviction_policy.linked_list import DoublyLinkedList


class FrequencyBucket:
    """All live entries sharing one access count, most recent at the head."""

    __slots__ = ("frequency", "entries", "lower", "higher")

    def __init__(self, frequency: int, arena: EntryArena):
        self.frequency = frequency
        self.entries = DoublyLinkedList(arena)
        self.lower: Optional["FrequencyBucket"] = None
        self.higher: Optional["FrequencyBucket"] = None

    def __repr__(self) -> str:
        return f"FrequencyBucket(frequency={self.frequency}, size={len(self.entries)})"


class FrequencyLedger:
    """
    Ordered collection of non-empty frequency buckets.

    Buckets are reachable by frequency through a dict and chained in
    ascending frequency order, with ``_min_bucket`` always pointing at the
    lowest one. A bucket is created next to its predecessor when an entry
    first reaches that frequency and dropped as soon as it empties, so
    every ledger operation is O(1).
    """

    def __init__(self, arena: EntryArena):
        self._arena = arena
        self._buckets: Dict[int, FrequencyBucket] = {}
        self._min_bucket: Optional[FrequencyBucket] = None
        self._size = 0

    @property
    def min_frequency(self) -> Optional[int]:
        return self._min_bucket.frequency if self._min_bucket else None

    def insert(self, slot: int) -> None:
        """
        Add a new entry with frequency 1 at the head of the frequency-1 bucket.

        Args:
            slot: The slot of the entry to add
        """
        entry = self._arena[slot]
        entry.frequency = 1
        bucket = self._buckets.get(1)
        if bucket is None:
            bucket = self._create_bucket(1, lower=None, higher=self._min_bucket)
        bucket.entries.add_to_head(slot)
        self._size += 1

    def touch(self, slot: int) -> int:
        """
        Count one more access for a live entry and move it to the next bucket.

        Args:
            slot: The slot of the accessed entry

        Returns:
            The entry's new frequency
        """
        entry = self._arena[slot]
        old_bucket = self._buckets[entry.frequency]
        new_frequency = entry.frequency + 1

        new_bucket = old_bucket.higher
        if new_bucket is None or new_bucket.frequency != new_frequency:
            new_bucket = self._create_bucket(new_frequency, lower=old_bucket, higher=new_bucket)

        old_bucket.entries.remove_node(slot)
        entry.frequency = new_frequency
        new_bucket.entries.add_to_head(slot)

        if old_bucket.entries.is_empty():
            self._drop_bucket(old_bucket)
        return new_frequency

    def unlink(self, slot: int) -> None:
        """Remove a live entry from its bucket."""
        entry = self._arena[slot]
        bucket = self._buckets[entry.frequency]
        bucket.entries.remove_node(slot)
        self._size -= 1
        if bucket.entries.is_empty():
            self._drop_bucket(bucket)

    def victim(self) -> Optional[int]:
        """Least recently used slot of the lowest-frequency bucket, or None."""
        if self._min_bucket is None:
            return None
        slot = self._min_bucket.entries.tail
        return None if slot == NIL else slot

    def pop_victim(self) -> Optional[int]:
        """Unlink and return the eviction victim, or None if the ledger is empty."""
        slot = self.victim()
        if slot is not None:
            self.unlink(slot)
        return slot

    def frequencies(self) -> List[int]:
        """Frequencies of the buckets currently present, ascending."""
        return [bucket.frequency for bucket in self._iter_buckets()]

    def bucket_size(self, frequency: int) -> int:
        bucket = self._buckets.get(frequency)
        return len(bucket.entries) if bucket else 0

    def clear(self) -> None:
        self._buckets.clear()
        self._min_bucket = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield slots in eviction order: ascending frequency, oldest first within a bucket."""
        for bucket in self._iter_buckets():
            yield from bucket.entries.iter_from_tail()

    def _iter_buckets(self) -> Iterator[FrequencyBucket]:
        bucket = self._min_bucket
        while bucket is not None:
            yield bucket
            bucket = bucket.higher

    def _create_bucket(
        self,
        frequency: int,
        lower: Optional[FrequencyBucket],
        higher: Optional[FrequencyBucket],
    ) -> FrequencyBucket:
        bucket = FrequencyBucket(frequency, self._arena)
        bucket.lower = lower
        bucket.higher = higher
        if lower is not None:
            lower.higher = bucket
        else:
            self._min_bucket = bucket
        if higher is not None:
            higher.lower = bucket
        self._buckets[frequency] = bucket
        return bucket

    def _drop_bucket(self, bucket: FrequencyBucket) -> None:
        if bucket.lower is not None:
            bucket.lower.higher = bucket.higher
        if bucket.higher is not None:
            bucket.higher.lower = bucket.lower
        if self._min_bucket is bucket:
            self._min_bucket = bucket.higher
        del self._buckets[bucket.frequency]
        bucket.lower = bucket.higher = None
