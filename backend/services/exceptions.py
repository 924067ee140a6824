"""
Service-layer exceptions.

Each error carries a stable `code` that commands put into their result objects
and viewsets turn into HTTP statuses.
"""


class ServiceError(Exception):
    """Base exception for service errors."""
    code = 'SERVICE_ERROR'
    default_message = '처리 중 오류가 발생했습니다.'

    def __init__(self, message: str = None, details: dict = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details


class ValidationFailure(ServiceError):
    """Required input missing or malformed."""
    code = 'VALIDATION_ERROR'
    default_message = '입력값이 올바르지 않습니다.'


class BackendFailure(ServiceError):
    """The backing store failed; nothing was retried."""
    code = 'BACKEND_FAILURE'
    default_message = '저장소 처리 중 오류가 발생했습니다.'


class AlreadyExists(ServiceError):
    """A record with the same id is already stored."""
    code = 'ALREADY_EXISTS'
    default_message = '같은 ID의 요청이 이미 존재합니다.'


class RecordNotFound(ServiceError):
    """No record with the given id."""
    code = 'REQUEST_NOT_FOUND'
    default_message = '요청 내역을 찾을 수 없습니다.'
