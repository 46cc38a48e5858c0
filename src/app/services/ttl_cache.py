"""TTL Result Caches

Process-local holders for computed report values. An entry is fresh while
its age is below the TTL and stale afterwards; stale values are kept so
callers can fall back to them when recomputation fails.
"""

import time
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

Clock = Callable[[], float]


class CacheState(str, Enum):
    """Freshness of a cache lookup"""
    FRESH = "fresh"
    STALE = "stale"
    EMPTY = "empty"


@dataclass
class CacheEntry(Generic[T]):
    """A computed value together with when it was computed"""

    data: T
    computed_at: float
    ttl: float

    def age(self, now: float) -> float:
        return now - self.computed_at

    def is_fresh(self, now: float) -> bool:
        return self.age(now) < self.ttl


@dataclass(frozen=True)
class CacheLookup(Generic[T]):
    """Result of reading a cache: its state and the value, if any"""

    state: CacheState
    value: Optional[T] = None
    computed_at: Optional[float] = None

    @property
    def is_fresh(self) -> bool:
        return self.state is CacheState.FRESH

    @property
    def has_value(self) -> bool:
        return self.state is not CacheState.EMPTY


EMPTY_LOOKUP: CacheLookup = CacheLookup(state=CacheState.EMPTY)


def _lookup(entry: Optional[CacheEntry[T]], now: float) -> CacheLookup[T]:
    if entry is None:
        return EMPTY_LOOKUP
    state = CacheState.FRESH if entry.is_fresh(now) else CacheState.STALE
    return CacheLookup(state=state, value=entry.data, computed_at=entry.computed_at)


class TTLCache(Generic[T]):
    """
    Single-value cache with a time-to-live

    Writes are last-write-wins: set() always replaces the stored value.
    Nothing is evicted on expiry; a stale value stays readable until replaced.
    """

    def __init__(self, ttl_seconds: float, clock: Clock = time.monotonic):
        """
        Initialize the cache

        Args:
            ttl_seconds: Seconds a value stays fresh
            clock: Monotonic time source (injectable for tests)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl = float(ttl_seconds)
        self.clock = clock
        self._entry: Optional[CacheEntry[T]] = None

    def get(self) -> CacheLookup[T]:
        return _lookup(self._entry, self.clock())

    def set(self, value: T) -> None:
        self._entry = CacheEntry(data=value, computed_at=self.clock(), ttl=self.ttl)

    def clear(self) -> None:
        self._entry = None


class KeyedTTLCache(Generic[K, T]):
    """
    TTL cache holding one value per key, bounded by an LRU policy

    Reading or writing a key marks it most recently used. When the number of
    keys exceeds max_entries the least recently used key is evicted.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int = 128,
        clock: Clock = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl = float(ttl_seconds)
        self.max_entries = max_entries
        self.clock = clock
        self._entries: "OrderedDict[K, CacheEntry[T]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: K) -> CacheLookup[T]:
        entry = self._entries.get(key)
        if entry is not None:
            self._entries.move_to_end(key)
        return _lookup(entry, self.clock())

    def set(self, key: K, value: T) -> None:
        self._entries[key] = CacheEntry(data=value, computed_at=self.clock(), ttl=self.ttl)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()


class KeyedCacheSlot(Generic[K, T]):
    """View of a single key of a KeyedTTLCache with the TTLCache interface"""

    def __init__(self, cache: KeyedTTLCache[K, T], key: K):
        self.cache = cache
        self.key = key

    def get(self) -> CacheLookup[T]:
        return self.cache.get(self.key)

    def set(self, value: T) -> None:
        self.cache.set(self.key, value)
