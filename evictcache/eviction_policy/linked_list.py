"""Doubly linked list threaded through arena entries."""

from typing import Iterator

from evictcache.arena import NIL, EntryArena


class DoublyLinkedList:
    """
    Doubly linked list of arena slots.

    The list stores only its head and tail slots; the links themselves live
    on the entries (``Entry.prev`` / ``Entry.next``), so an entry can be
    spliced out in O(1) given just its slot. An entry belongs to at most one
    list at a time.
    """

    def __init__(self, arena: EntryArena):
        self._arena = arena
        self.head = NIL
        self.tail = NIL
        self._size = 0

    def add_to_head(self, slot: int) -> None:
        """
        Add an unlinked entry to the head of the list.

        Args:
            slot: The slot of the entry to add
        """
        entry = self._arena[slot]
        entry.prev = NIL
        entry.next = self.head
        if self.head != NIL:
            self._arena[self.head].prev = slot
        else:
            self.tail = slot
        self.head = slot
        self._size += 1

    def remove_node(self, slot: int) -> None:
        """
        Splice an entry out of the list.

        Args:
            slot: The slot of the entry to remove
        """
        entry = self._arena[slot]
        if entry.prev != NIL:
            self._arena[entry.prev].next = entry.next
        else:
            self.head = entry.next
        if entry.next != NIL:
            self._arena[entry.next].prev = entry.prev
        else:
            self.tail = entry.prev
        entry.prev = entry.next = NIL
        self._size -= 1

    def remove_tail(self) -> int:
        """
        Remove and return the tail slot (least recently used in this list).

        Returns:
            The removed slot, or NIL if the list is empty
        """
        slot = self.tail
        if slot != NIL:
            self.remove_node(slot)
        return slot

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self.head = self.tail = NIL
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield slots from head to tail."""
        slot = self.head
        while slot != NIL:
            yield slot
            slot = self._arena[slot].next

    def iter_from_tail(self) -> Iterator[int]:
        """Yield slots from tail to head."""
        slot = self.tail
        while slot != NIL:
            yield slot
            slot = self._arena[slot].prev
