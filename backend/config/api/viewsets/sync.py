"""
Sync ViewSet - endpoints called by the MakeEdu browser extension.

- GET /sync/connection
- GET /sync/version?current=
- GET /sync/requests
- POST /sync/payment-status
- GET /sync/history

Every endpoint needs the X-Sync-Secret header; the admin token plays no part.
"""
from django.conf import settings

from .base import BaseViewSet
from config.api.contracts import PaymentStatusBody
from config.api.permissions import HasSyncSecret
from services.commands import SyncPaymentStatusCommand
from services.queries import GetPendingSyncRequestsQuery, GetSyncHistoryQuery


class SyncViewSet(BaseViewSet):
    """MakeEdu 동기화"""

    authentication_classes = []
    permission_classes = [HasSyncSecret]

    def connection(self, request):
        """
        연결 확인
        GET /sync/connection
        """
        return self.success({'success': True})

    def version(self, request):
        """
        확장 프로그램 최신 버전 확인
        GET /sync/version?current=1.0.0
        """
        latest = getattr(settings, 'EXTENSION_LATEST_VERSION', '')
        current = request.query_params.get('current', '')

        return self.success({
            'current_version': current or None,
            'latest_version': latest or None,
            'update_available': bool(latest and current and latest != current),
            'download_url': getattr(settings, 'EXTENSION_DOWNLOAD_URL', '') or None,
        })

    def pending_requests(self, request):
        """
        동기화 대상 요청 목록
        GET /sync/requests
        """
        result = self.get_query(GetPendingSyncRequestsQuery).execute()

        if not result.success:
            return self.result_error(result)

        return self.success({
            'requests': result.requests,
            'counts': result.counts,
        })

    def payment_status(self, request):
        """
        납부 상태 동기화
        POST /sync/payment-status

        200 with the updated request on a match, 404 NOT_FOUND, or
        409 AMBIGUOUS with candidates to resubmit with request_id.
        """
        data, error = self.validate_request(PaymentStatusBody, request.data)
        if error:
            return error

        result = self.get_command(SyncPaymentStatusCommand).execute(
            student_name=data.student_name,
            book_name=data.book_name,
            is_paid=data.is_paid,
            request_id=data.request_id,
        )

        if not result.success:
            details = {'candidates': result.candidates} if result.candidates else None
            return self.result_error(result, details=details)

        return self.success({
            'success': True,
            'outcome': result.outcome,
            'request': result.request,
        })

    def history(self, request):
        """
        동기화 이력 (최신순)
        GET /sync/history
        """
        result = self.get_query(GetSyncHistoryQuery).execute()
        return self.success({
            'entries': result.entries,
            'limit': result.limit,
        })
