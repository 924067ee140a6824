"""
Sync Log - recent payment syncs, kept for operators only.

Entries live in the cache as a capped list under one global key: newest
first, oldest insertion evicted once the limit is reached. Nothing reads the
log back into request records.
"""
from dataclasses import dataclass, asdict
from typing import List, Optional

from infrastructure.cache import Cache

SYNC_LOG_KEY = 'sync:history'
DEFAULT_LIMIT = 50


@dataclass
class SyncLogEntry:
    student_name: str
    book_name: str
    is_completed: bool
    is_paid: bool
    synced_at: str

    def to_dict(self) -> dict:
        return asdict(self)


class SyncLog:
    """결제 동기화 이력"""

    def __init__(self, cache: Cache, limit: int = DEFAULT_LIMIT, key: str = SYNC_LOG_KEY):
        if limit < 1:
            raise ValueError("limit must be positive")
        self._cache = cache
        self._limit = limit
        self._key = key

    @property
    def limit(self) -> int:
        return self._limit

    def append(self, entry: SyncLogEntry) -> None:
        self._cache.push_json(self._key, entry.to_dict(), self._limit)

    def entries(self, limit: Optional[int] = None) -> List[SyncLogEntry]:
        """Stored entries, newest first."""
        items = self._cache.get_json_list(self._key)
        if limit is not None:
            items = items[:limit]
        return [SyncLogEntry(**item) for item in items]

    def clear(self) -> None:
        self._cache.delete(self._key)
