"""
Delete Request Command - hard deletes a request.

DELETE /requests/{id}
"""
from typing import Optional
from dataclasses import dataclass

from services.exceptions import ServiceError

from .base import BaseCommand


@dataclass
class DeleteRequestResult:
    success: bool
    error: Optional[str] = None
    error_code: Optional[str] = None


class DeleteRequestCommand(BaseCommand[DeleteRequestResult]):
    """교재 요청서 삭제"""

    def execute(self, request_id: str) -> DeleteRequestResult:
        try:
            self._store.delete(request_id)
        except ServiceError as e:
            self.log_warning("Request not deleted", request_id=request_id, error_code=e.code)
            return self.failure(DeleteRequestResult, e)

        self.publish_event('request.deleted', {'request_id': request_id})
        self.log_info("Request deleted", request_id=request_id)

        return DeleteRequestResult(success=True)
