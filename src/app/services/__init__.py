from .connection_manager import ConnectionLifecycleManager, ConnectionState
from .store_connector import StoreConnector
from .store_errors import (
    StoreError,
    StoreConnectionError,
    StoreTimeoutError,
    StoreQueryError,
)
from .ttl_cache import (
    CacheState,
    CacheEntry,
    CacheLookup,
    TTLCache,
    KeyedTTLCache,
    KeyedCacheSlot,
)

__all__ = [
    "ConnectionLifecycleManager",
    "ConnectionState",
    "StoreConnector",
    "StoreError",
    "StoreConnectionError",
    "StoreTimeoutError",
    "StoreQueryError",
    "CacheState",
    "CacheEntry",
    "CacheLookup",
    "TTLCache",
    "KeyedTTLCache",
    "KeyedCacheSlot",
]
