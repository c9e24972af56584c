"""
Bounded result cache for forward transliteration.

Eviction is FIFO: the oldest inserted key goes first, reads do not
refresh an entry.
"""

import threading
from collections import OrderedDict
from typing import Hashable, Optional

from ..utils.config import MAX_CACHE_SIZE, get_loaded_config
from ..utils.logger import get_logger

logger = get_logger("translit.cache")


class ResultCache:
    """Fixed-capacity mapping of (input, options) -> output."""

    def __init__(self, max_size: int = MAX_CACHE_SIZE):
        self.max_size = max(1, max_size)
        self._entries: "OrderedDict[Hashable, str]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[str]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: Hashable, value: str) -> None:
        with self._lock:
            if key in self._entries:
                return
            while len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache full ({self.max_size}), evicted {evicted!r}")
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries


# Process-wide cache, built on first use
_cache: Optional[ResultCache] = None
_cache_lock = threading.Lock()


def get_cache() -> ResultCache:
    """
    Get the process-wide result cache.

    Sized from ``engine.cache_size`` when the host has loaded a
    configuration, otherwise MAX_CACHE_SIZE. Never reads settings itself.
    """
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                config = get_loaded_config()
                size = MAX_CACHE_SIZE
                if config is not None:
                    size = min(config.engine.cache_size, MAX_CACHE_SIZE)
                _cache = ResultCache(size)
                logger.debug(f"Result cache created with capacity {size}")
    return _cache


def reset_cache() -> None:
    """
    Drop the process-wide cache (for testing).
    """
    global _cache
    with _cache_lock:
        _cache = None
