"""
In-memory entity cache

Read-through cache for single-entity lookups, keyed by (entity name, id).
Services evict on every write, together with the records of dependent
entities that embed or cascade from the written one, so readers never see a
stale record from this process. Each process holds its own copy.
"""
import time
import logging
import threading
from typing import Any, Dict, Hashable, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)


class EntityCache:
    """
    Thread-safe in-memory cache with optional TTL

    Values are stored as given; callers store immutable snapshots (DTOs),
    never live ORM instances.
    """

    def __init__(self, ttl_seconds: int = 0, enabled: bool = True):
        # {(entity_name, id): (stored_at, value)}
        self._entries: Dict[Tuple[str, Hashable], Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self.ttl_seconds = ttl_seconds
        self.enabled = enabled

    def _is_expired(self, stored_at: float) -> bool:
        if not self.ttl_seconds:
            return False
        return time.time() - stored_at > self.ttl_seconds

    def get(self, entity_name: str, entity_id: Hashable) -> Optional[Any]:
        """Return the cached value or None on miss/expiry"""
        if not self.enabled:
            return None

        key = (entity_name, entity_id)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug(f"Cache miss: {entity_name}#{entity_id}")
                return None

            stored_at, value = entry
            if self._is_expired(stored_at):
                del self._entries[key]
                logger.debug(f"Cache expired: {entity_name}#{entity_id}")
                return None

        logger.debug(f"Cache hit: {entity_name}#{entity_id}")
        return value

    def put(self, entity_name: str, entity_id: Hashable, value: Any) -> None:
        if not self.enabled or entity_id is None:
            return
        with self._lock:
            self._entries[(entity_name, entity_id)] = (time.time(), value)

    def evict(self, entity_name: str, entity_id: Hashable) -> None:
        with self._lock:
            self._entries.pop((entity_name, entity_id), None)

    def evict_entity(self, entity_name: str) -> None:
        """Drop every cached record of one entity type"""
        with self._lock:
            for key in [k for k in self._entries if k[0] == entity_name]:
                del self._entries[key]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Global cache instance
entity_cache = EntityCache(
    ttl_seconds=settings.CACHE_TTL_SECONDS,
    enabled=settings.CACHE_ENABLED,
)
