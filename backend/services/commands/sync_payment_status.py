"""
Sync Payment Status Command - applies one payment row seen on MakeEdu.

POST /sync/payment-status
"""
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from django.conf import settings

from services.exceptions import ServiceError
from services.lifecycle import reconciliation_updates
from services.matching import MatchOutcome, MatchResult, ReconciliationMatcher
from services.store import to_dict
from services.sync_log import SyncLog, SyncLogEntry

from .base import BaseCommand


@dataclass
class SyncPaymentStatusResult:
    """
    Result of a payment sync.

    `outcome` is one of matched / not_found / ambiguous; only a match
    writes anything.
    """
    success: bool
    outcome: Optional[str] = None
    request: Optional[Dict[str, Any]] = None
    candidates: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None
    error_code: Optional[str] = None


class SyncPaymentStatusCommand(BaseCommand[SyncPaymentStatusResult]):
    """
    MakeEdu 납부 상태 동기화

    A match marks the request registered, and paid when the external box is
    checked. An unchecked box never clears payment.
    """

    def __init__(self, *args, matcher: Optional[ReconciliationMatcher] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._matcher = matcher or ReconciliationMatcher()

    def execute(
        self,
        student_name: str,
        book_name: str,
        is_paid: bool,
        request_id: Optional[str] = None,
    ) -> SyncPaymentStatusResult:
        try:
            records = self._store.all()
        except ServiceError as e:
            return self.failure(SyncPaymentStatusResult, e)

        if request_id:
            result = self._select(student_name, book_name, request_id, records)
        else:
            result = self._matcher.match(student_name, book_name, records)

        if result.outcome == MatchOutcome.NOT_FOUND:
            return SyncPaymentStatusResult(
                success=False,
                outcome=result.outcome.value,
                error="일치하는 요청을 찾을 수 없습니다.",
                error_code="NOT_FOUND"
            )

        if result.outcome == MatchOutcome.AMBIGUOUS:
            return SyncPaymentStatusResult(
                success=False,
                outcome=result.outcome.value,
                candidates=[c.to_dict() for c in result.candidates],
                error="일치하는 요청이 여러 건입니다. 요청을 선택해 주세요.",
                error_code="AMBIGUOUS"
            )

        now = self._clock.now()
        updates = reconciliation_updates(is_paid, now)

        try:
            record = self._store.update(result.record.id, updates)
        except ServiceError as e:
            self.log_error("Payment sync write failed", request_id=result.record.id, error_code=e.code)
            return self.failure(SyncPaymentStatusResult, e)

        # The log is observational; the record is already written.
        try:
            self._sync_log().append(SyncLogEntry(
                student_name=student_name,
                book_name=book_name,
                is_completed=True,
                is_paid=bool(is_paid),
                synced_at=now.isoformat(),
            ))
        except Exception as e:
            self.log_error("Sync log append failed", request_id=record.id, error=str(e))

        self.publish_event('request.synced', {
            'request_id': record.id,
            'is_paid': bool(is_paid),
        })

        self.log_info(
            "Payment status synced",
            request_id=record.id,
            is_paid=bool(is_paid)
        )

        return SyncPaymentStatusResult(
            success=True,
            outcome=MatchOutcome.MATCHED.value,
            request=to_dict(record)
        )

    def _select(self, student_name: str, book_name: str, request_id: str, records) -> MatchResult:
        """Resolve an ambiguous match with the candidate the operator picked."""
        for record in self._matcher.find_candidates(student_name, book_name, records):
            if record.id == request_id:
                return MatchResult(outcome=MatchOutcome.MATCHED, record=record)
        return MatchResult(outcome=MatchOutcome.NOT_FOUND)

    def _sync_log(self) -> SyncLog:
        return SyncLog(self._cache, limit=getattr(settings, 'SYNC_HISTORY_LIMIT', 50))
