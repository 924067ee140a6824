"""
Admin Gate ViewSet - unlock and lock status editing.

- POST /admin/unlock
- POST /admin/lock
"""
from rest_framework import status

from .base import BaseViewSet
from config.api.contracts import UnlockBody
from config.api.permissions import IsAdminToken
from services.admin_gate import AdminGateService
from services.queries import GetStatusCountsQuery


class AdminGateViewSet(BaseViewSet):
    """관리자 모드"""

    def get_permissions(self):
        if self.action == 'lock':
            return [IsAdminToken()]
        return super().get_permissions()

    def unlock(self, request):
        """
        관리자 모드 전환
        POST /admin/unlock

        The answer carries the outstanding counts shown on unlock.
        """
        data, error = self.validate_request(UnlockBody, request.data)
        if error:
            return error

        gate = self.get_service(AdminGateService)
        result = gate.unlock(data.secret, client_key=self._client_key(request))

        if not result.success:
            details = None
            if result.remaining_attempts is not None:
                details = {'remaining_attempts': result.remaining_attempts}
            return self.result_error(result, details=details)

        counts = self.get_query(GetStatusCountsQuery).execute()

        return self.success({
            'token': result.token,
            'expires_in': result.expires_in,
            'counts': counts.counts if counts.success else None,
        })

    def lock(self, request):
        """
        관리자 모드 해제
        POST /admin/lock
        """
        self.get_service(AdminGateService).lock(request.auth)
        return self.success({'success': True}, status_code=status.HTTP_200_OK)

    @staticmethod
    def _client_key(request) -> str:
        forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
        if forwarded:
            return forwarded.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR', '') or 'anonymous'
