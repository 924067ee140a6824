"""
Dashboard ViewSet - operations counts.

- GET /dashboard/stats
"""
from .base import BaseViewSet
from config.api.permissions import IsAdminToken
from services.queries import GetStatusCountsQuery


class DashboardViewSet(BaseViewSet):
    """미처리 현황"""

    permission_classes = [IsAdminToken]

    def list(self, request):
        """
        등록/납부/주문 미완료 건수
        GET /dashboard/stats
        """
        result = self.get_query(GetStatusCountsQuery).execute()

        if not result.success:
            return self.result_error(result)

        return self.success(result.counts)
