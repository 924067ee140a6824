"""
Get Sync History Query - recent payment syncs, newest first.

GET /sync/history
"""
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from django.conf import settings

from services.sync_log import SyncLog

from .base import BaseQuery


@dataclass
class GetSyncHistoryResult:
    entries: List[Dict[str, Any]] = field(default_factory=list)
    limit: int = 0


class GetSyncHistoryQuery(BaseQuery[GetSyncHistoryResult]):
    """동기화 이력 조회"""

    def execute(self, limit: Optional[int] = None) -> GetSyncHistoryResult:
        sync_log = SyncLog(self._cache, limit=getattr(settings, 'SYNC_HISTORY_LIMIT', 50))
        entries = sync_log.entries(limit=limit)
        return GetSyncHistoryResult(
            entries=[e.to_dict() for e in entries],
            limit=sync_log.limit
        )
