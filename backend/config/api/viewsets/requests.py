"""
Requests ViewSet - textbook request history and status endpoints.

- GET /requests
- POST /requests
- GET /requests/{id}
- DELETE /requests/{id}
- PATCH /requests/{id}/status
- POST /requests/bulk-status
- POST /requests/{id}/message
"""
from django.conf import settings
from rest_framework import status

from .base import BaseViewSet, STATUS_BY_ERROR_CODE
from config.api.contracts import (
    BulkStatusBody,
    CreateRequestBody,
    ListRequestsParams,
    UpdateStatusBody,
)
from config.api.permissions import IsAdminToken
from services.commands import (
    BulkUpdateStatusCommand,
    CreateRequestCommand,
    DeleteRequestCommand,
    UpdateRequestStatusCommand,
)
from services.exceptions import ServiceError
from services.messaging import ParentMessageService
from services.queries import GetRequestDetailQuery, GetRequestsQuery
from services.store import RequestStore


class RequestsViewSet(BaseViewSet):
    """교재 요청서"""

    ADMIN_ACTIONS = ('update_status', 'bulk_status')

    def get_permissions(self):
        if self.action in self.ADMIN_ACTIONS:
            return [IsAdminToken()]
        return super().get_permissions()

    def list(self, request):
        """
        요청 내역 조회
        GET /requests?filter=incomplete|complete&page=&page_size=&search=
        """
        params = {'page_size': getattr(settings, 'REQUESTS_PAGE_SIZE', 20)}
        params.update(request.query_params.dict())
        data, error = self.validate_request(ListRequestsParams, params)
        if error:
            return error

        result = self.get_query(GetRequestsQuery).execute(
            filter=data.filter,
            page=data.page,
            page_size=data.page_size,
            search=data.search or None,
        )

        if not result.success:
            return self.result_error(result)

        return self.success({
            'requests': result.requests,
            'pagination': {
                'total_count': result.total_count,
                'total_pages': result.total_pages,
                'current_page': result.current_page,
                'has_next_page': result.has_next_page,
                'has_prev_page': result.has_prev_page,
            },
            'opposite_count': result.opposite_count,
        })

    def create(self, request):
        """
        요청서 저장
        POST /requests
        """
        data, error = self.validate_request(CreateRequestBody, request.data)
        if error:
            return error

        result = self.get_command(CreateRequestCommand).execute(**data.model_dump())

        if not result.success:
            return self.result_error(result)

        return self.success({
            'success': True,
            'message': '요청 내역이 저장되었습니다.',
            'request': result.request,
        }, status_code=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """
        요청서 상세
        GET /requests/{id}
        """
        result = self.get_query(GetRequestDetailQuery).execute(request_id=pk)

        if not result.found:
            return self.result_error(result)

        return self.success({'request': result.request})

    def destroy(self, request, pk=None):
        """
        요청서 삭제
        DELETE /requests/{id}
        """
        result = self.get_command(DeleteRequestCommand).execute(request_id=pk)

        if not result.success:
            return self.result_error(result)

        return self.success({'success': True, 'message': '삭제되었습니다.'})

    def update_status(self, request, pk=None):
        """
        등록/납부/주문 상태 변경 (관리자)
        PATCH /requests/{id}/status

        Returns the stored record so the client can confirm or roll back
        its optimistic update.
        """
        data, error = self.validate_request(UpdateStatusBody, request.data)
        if error:
            return error

        result = self.get_command(UpdateRequestStatusCommand).execute(
            request_id=pk,
            changes=data.changes()
        )

        if not result.success:
            return self.result_error(result)

        return self.success({
            'success': True,
            'changed': result.changed,
            'request': result.request,
        })

    def bulk_status(self, request):
        """
        등록 상태 일괄 변경 (관리자)
        POST /requests/bulk-status
        """
        data, error = self.validate_request(BulkStatusBody, request.data)
        if error:
            return error

        result = self.get_command(BulkUpdateStatusCommand).execute(
            request_ids=data.ids,
            is_completed=data.is_completed
        )

        if result.error_code == 'VALIDATION_ERROR':
            return self.result_error(result)

        action = '등록 완료' if data.is_completed else '등록 취소'
        return self.success({
            'success': result.success,
            'message': f'{len(result.updated_ids)}개의 항목이 {action}되었습니다.',
            'updated_ids': result.updated_ids,
            'failed_ids': result.failed_ids,
        })

    def parent_message(self, request, pk=None):
        """
        학부모 안내 메시지 생성
        POST /requests/{id}/message
        """
        try:
            record = self.get_service(RequestStore).get(pk)
        except ServiceError as e:
            return self.error(e.message, e.code, STATUS_BY_ERROR_CODE.get(e.code, 503))

        result = self.get_service(ParentMessageService).generate(record)

        return self.success({
            'message': result.text,
            'generated': result.generated,
        })
