"""
Base ViewSet for all API endpoints.
"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from pydantic import ValidationError
from typing import Type, TypeVar, Optional, Tuple

from infrastructure.bootstrap import get_container
from config.api.contracts.base import ErrorResponse

T = TypeVar('T')

# Result error codes -> HTTP status
STATUS_BY_ERROR_CODE = {
    'VALIDATION_ERROR': status.HTTP_400_BAD_REQUEST,
    'REQUEST_NOT_FOUND': status.HTTP_404_NOT_FOUND,
    'TEXTBOOK_NOT_FOUND': status.HTTP_404_NOT_FOUND,
    'NOT_FOUND': status.HTTP_404_NOT_FOUND,
    'ALREADY_EXISTS': status.HTTP_409_CONFLICT,
    'AMBIGUOUS': status.HTTP_409_CONFLICT,
    'INVALID_SECRET': status.HTTP_401_UNAUTHORIZED,
    'TOO_MANY_ATTEMPTS': status.HTTP_429_TOO_MANY_REQUESTS,
    'BACKEND_FAILURE': status.HTTP_503_SERVICE_UNAVAILABLE,
    'ADMIN_SECRET_NOT_CONFIGURED': status.HTTP_503_SERVICE_UNAVAILABLE,
}


def api_exception_handler(exc, context):
    """DRF exceptions (auth, permission, parse, 405) in the ErrorResponse shape."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    code = str(getattr(exc, 'default_code', 'error')).upper()

    response.data = ErrorResponse(
        error=str(detail) if detail else str(exc),
        code=code,
        details=None if detail else {'errors': response.data}
    ).model_dump()
    return response


class BaseViewSet(viewsets.ViewSet):
    """
    Base ViewSet with common functionality.

    Provides:
    - DI container access
    - Command/Query execution
    - Pydantic validation
    - Standard error responses
    """

    def get_container(self):
        """Get the DI container."""
        return get_container()

    def get_command(self, command_class: Type[T]) -> T:
        """Get a Command instance from the container."""
        return self.get_container().get(command_class)

    def get_query(self, query_class: Type[T]) -> T:
        """Get a Query instance from the container."""
        return self.get_container().get(query_class)

    def get_service(self, service_class: Type[T]) -> T:
        """Get a domain service from the container."""
        return self.get_container().get(service_class)

    def validate_request(
        self,
        request_model: Type[T],
        data
    ) -> Tuple[Optional[T], Optional[Response]]:
        """
        Validate request data with Pydantic model.

        Returns:
            Tuple of (validated_model, None) on success
            Tuple of (None, error_response) on failure
        """
        if not isinstance(data, dict):
            data = dict(data.items()) if hasattr(data, 'items') else {}
        try:
            return request_model(**data), None
        except ValidationError as e:
            return None, self.validation_error(e)

    def validation_error(self, error: ValidationError) -> Response:
        """Create validation error response."""
        return Response(
            ErrorResponse(
                error="입력값이 올바르지 않습니다.",
                code="VALIDATION_ERROR",
                details={'errors': error.errors(include_url=False, include_context=False, include_input=False)}
            ).model_dump(),
            status=status.HTTP_400_BAD_REQUEST
        )

    def success(self, data, status_code: int = status.HTTP_200_OK) -> Response:
        """Create success response."""
        return Response(data, status=status_code)

    def error(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict = None
    ) -> Response:
        """Create error response."""
        return Response(
            ErrorResponse(
                error=message,
                code=code,
                details=details
            ).model_dump(),
            status=status_code
        )

    def result_error(self, result, details: dict = None) -> Response:
        """Error response for a failed command/query result, status chosen by its error code."""
        return self.error(
            result.error,
            result.error_code,
            STATUS_BY_ERROR_CODE.get(result.error_code, status.HTTP_400_BAD_REQUEST),
            details=details if details is not None else getattr(result, 'details', None)
        )

    def not_found(self, message: str = "Not found") -> Response:
        """Create 404 response."""
        return self.error(message, "NOT_FOUND", status.HTTP_404_NOT_FOUND)
