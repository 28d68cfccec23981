"""Tests for the LRU recency list."""

from typing import List

import pytest

from evictcache.arena import NIL, EntryArena
from evictcache.eviction_policy.recency_list import RecencyList


@pytest.fixture
def arena() -> EntryArena:
    return EntryArena()


def _keys(arena: EntryArena, slots) -> List[str]:
    return [arena[slot].key for slot in slots]


def _filled(arena: EntryArena, *keys: str) -> RecencyList:
    recency = RecencyList(arena)
    for key in keys:
        recency.push_front(arena.allocate(key, None))
    return recency


class TestRecencyList:
    """RecencyList tests"""

    def test_empty_list(self, arena: EntryArena) -> None:
        recency = RecencyList(arena)
        assert len(recency) == 0
        assert recency.head is None
        assert recency.tail is None
        assert recency.pop_tail() is None

    def test_push_front_orders_most_recent_first(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a", "b", "c")
        assert _keys(arena, recency) == ["c", "b", "a"]
        assert _keys(arena, recency.victim_order()) == ["a", "b", "c"]
        assert arena[recency.head].key == "c"
        assert arena[recency.tail].key == "a"

    def test_move_to_front_from_tail(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a", "b", "c")
        recency.move_to_front(recency.tail)
        assert _keys(arena, recency) == ["a", "c", "b"]
        assert len(recency) == 3

    def test_move_to_front_from_middle(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a", "b", "c")
        middle = arena[recency.head].next
        recency.move_to_front(middle)
        assert _keys(arena, recency) == ["b", "c", "a"]

    def test_move_head_to_front_is_noop(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a", "b")
        recency.move_to_front(recency.head)
        assert _keys(arena, recency) == ["b", "a"]

    def test_pop_tail_returns_least_recent(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a", "b")
        slot = recency.pop_tail()
        assert arena[slot].key == "a"
        assert arena[slot].prev == NIL and arena[slot].next == NIL
        assert _keys(arena, recency) == ["b"]
        assert recency.head == recency.tail

    def test_unlink_only_entry_empties_list(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a")
        recency.unlink(recency.head)
        assert len(recency) == 0
        assert recency.head is None and recency.tail is None

    def test_backward_links_match_forward_links(self, arena: EntryArena) -> None:
        recency = _filled(arena, "a", "b", "c", "d")
        recency.move_to_front(recency.tail)
        recency.unlink(arena[recency.head].next)
        forward = list(recency)
        backward = list(recency.victim_order())
        assert forward == backward[::-1]
