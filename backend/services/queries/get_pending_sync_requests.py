"""
Get Pending Sync Requests Query - what the browser extension still has to check.

GET /sync/requests
"""
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from django.db import DatabaseError

from services.exceptions import ServiceError
from services.store import FULLY_COMPLETE_Q

from .base import BaseQuery


@dataclass
class GetPendingSyncRequestsResult:
    success: bool
    requests: List[Dict[str, Any]] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetPendingSyncRequestsQuery(BaseQuery[GetPendingSyncRequestsResult]):
    """
    동기화 대상 요청 목록

    Every request that is not fully complete, newest first, with the
    per-status counts the extension popup shows.
    """

    def execute(self) -> GetPendingSyncRequestsResult:
        from apps.textbook_requests.models import TextbookRequest

        try:
            pending = list(
                TextbookRequest.objects
                .exclude(FULLY_COMPLETE_Q)
                .order_by('-created_at')
                .values('id', 'student_name', 'book_name', 'teacher_name',
                        'is_completed', 'is_paid', 'is_ordered')
            )
            counts = self._store.count_by_status()
        except DatabaseError as e:
            self._logger.error(f"Failed to load pending requests: {e}")
            return GetPendingSyncRequestsResult(
                success=False,
                error="저장소 처리 중 오류가 발생했습니다.",
                error_code="BACKEND_FAILURE"
            )
        except ServiceError as e:
            return GetPendingSyncRequestsResult(success=False, error=e.message, error_code=e.code)

        return GetPendingSyncRequestsResult(
            success=True,
            requests=pending,
            counts={
                'not_registered': counts.registered,
                'not_paid': counts.paid,
                'not_ordered': counts.ordered,
                'total': counts.total,
            }
        )
