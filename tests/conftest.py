"""Shared test fixtures."""

from typing import Any, Hashable, List, Tuple

import pytest

from evictcache.cache_factory import reset_in_memory_cache
from evictcache.config import get_settings


class CallbackRecorder:
    """Eviction callback that records every invocation."""

    def __init__(self):
        self.calls: List[Tuple[Hashable, Any, Any]] = []

    def __call__(self, key: Hashable, value: Any, user_context: Any) -> None:
        self.calls.append((key, value, user_context))

    @property
    def keys(self) -> List[Hashable]:
        return [key for key, _, _ in self.calls]


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test and drop the shared cache afterwards."""
    get_settings.cache_clear()
    yield
    reset_in_memory_cache()
    get_settings.cache_clear()
