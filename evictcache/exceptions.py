"""Custom exceptions for in-memory cache operations."""

from typing import Any


class CacheError(Exception):
    """Base class for every error raised by the cache."""


class InvalidCapacityError(CacheError, ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""

    def __init__(self, capacity: Any):
        self.capacity = capacity
        super().__init__(f"Invalid capacity: {capacity!r}. Must be a positive integer greater than 0")


class KeyNotFoundError(CacheError, KeyError):
    """Raised when a key is looked up that is not present in the cache."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found in cache: {self.key!r}"


class InvalidEvictionPolicyError(CacheError, ValueError):
    """Raised when an invalid eviction policy is provided."""

    def __init__(self, policy: str):
        self.policy = policy
        super().__init__(f"Invalid eviction policy: {policy}. Supported policies: LRU, LFU")


class CacheReentrancyError(CacheError, RuntimeError):
    """Raised when an eviction callback calls back into the cache that invoked it."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Cannot call '{operation}' from inside an eviction callback of the same cache"
        )
