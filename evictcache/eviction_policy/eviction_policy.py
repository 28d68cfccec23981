"""Eviction policy definitions for in-memory cache."""

from enum import Enum


class EvictionPolicy(str, Enum):
    """Enumeration of supported eviction policies."""

    LRU = "LRU"  # Least Recently Used
    LFU = "LFU"  # Least Frequently Used


class EvictionReason(str, Enum):
    """Why an entry was handed to the eviction callback."""

    CAPACITY = "capacity"
    OVERWRITE = "overwrite"
    TEARDOWN = "teardown"
