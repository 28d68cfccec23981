"""Tests for the LFU cache."""

import pytest

from evictcache import KeyNotFoundError, LFUCache


class TestLFUEviction:
    """LFU eviction order"""

    def test_lowest_frequency_is_evicted(self, recorder) -> None:
        """A=1, B=3, C=2: inserting D evicts A"""
        cache = LFUCache(3, eviction_callback=recorder)
        cache.set("A", 1)
        cache.set("B", 2)
        cache.set("C", 3)
        cache.get("B")
        cache.get("B")
        cache.get("C")
        assert [cache.frequency(k) for k in "ABC"] == [1, 3, 2]

        cache.set("D", 4)
        assert recorder.keys == ["A"]
        assert cache.frequency("D") == 1

    def test_ties_are_broken_by_recency(self, recorder) -> None:
        """Equal frequencies: the least recently used one goes first"""
        cache = LFUCache(2, eviction_callback=recorder)
        cache.set("A", 1)
        cache.set("B", 2)
        cache.set("C", 3)
        assert recorder.keys == ["A"]
        assert cache.keys() == ["B", "C"]

    def test_ties_within_higher_bucket(self, recorder) -> None:
        cache = LFUCache(2, eviction_callback=recorder)
        cache.set("A", 1)
        cache.set("B", 2)
        cache.get("B")
        cache.get("A")
        # both at frequency 2, B reached it first
        cache.set("C", 3)
        assert recorder.keys == ["B"]

    def test_overwrite_counts_as_access(self) -> None:
        cache = LFUCache(2)
        cache.set("a", 1)
        cache.set("a", 2)
        cache.set("a", 3)
        assert cache.frequency("a") == 3
        assert cache.min_frequency == 3

    def test_new_entry_can_be_evicted_immediately_after(self, recorder) -> None:
        cache = LFUCache(2, eviction_callback=recorder)
        cache.set("hot", 1)
        cache.get("hot")
        cache.set("x", 1)
        cache.set("y", 1)
        cache.set("z", 1)
        assert recorder.keys == ["x", "y"]
        assert cache.keys() == ["z", "hot"]

    def test_miss_is_not_a_frequency_event(self) -> None:
        cache = LFUCache(2)
        cache.set("a", 1)
        assert cache.get("b", None) is None
        assert cache.frequency("a") == 1
        assert "b" not in cache
        with pytest.raises(KeyNotFoundError):
            cache.frequency("b")

    def test_peek_and_contains_do_not_count(self) -> None:
        cache = LFUCache(2)
        cache.set("a", 1)
        cache.peek("a")
        cache.contains("a")
        assert cache.frequency("a") == 1

    def test_capacity_one(self, recorder) -> None:
        cache = LFUCache(1, eviction_callback=recorder)
        cache.set("a", 1)
        cache.get("a")
        cache.get("a")
        cache.set("b", 2)
        assert recorder.keys == ["a"]
        assert cache.keys() == ["b"]
        assert cache.min_frequency == 1

    def test_remove_updates_minimum(self) -> None:
        cache = LFUCache(3)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("b")
        assert cache.min_frequency == 1
        cache.remove("a")
        assert cache.min_frequency == 2
        cache.remove("b")
        assert cache.min_frequency is None

    def test_keys_are_in_victim_order(self) -> None:
        cache = LFUCache(4)
        for key in "abcd":
            cache.set(key, key)
        cache.get("a")
        cache.get("a")
        cache.get("c")
        assert cache.keys() == ["b", "d", "c", "a"]
