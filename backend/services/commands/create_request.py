"""
Create Request Command - stores a new textbook purchase request.

POST /requests
"""
import re
from datetime import date
from typing import Optional, Dict, Any
from dataclasses import dataclass

from services.exceptions import ServiceError, ValidationFailure
from services.store import to_dict
from utils.datetime import id_timestamp, local_date

from .base import BaseCommand

_BOOK_ID_PATTERN = re.compile(r'[^a-zA-Z0-9가-힣]')

ACCOUNT_FIELDS = ('bank_name', 'account_number', 'account_holder')


def build_request_id(teacher_name: str, student_name: str, book_name: str, timestamp: str) -> str:
    """{teacher}_{student}_{book without symbols}_{YYYYMMDDHHmmssSSS}"""
    sanitized_book = _BOOK_ID_PATTERN.sub('', book_name)
    return f"{teacher_name}_{student_name}_{sanitized_book}_{timestamp}"


@dataclass
class CreateRequestResult:
    """Result of creating a request."""
    success: bool
    request: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class CreateRequestCommand(BaseCommand[CreateRequestResult]):
    """
    교재 요청서 저장

    POST /requests
    Account fields left blank are filled from the academy account settings.
    """

    def execute(
        self,
        student_name: str,
        book_name: str,
        teacher_name: str = '',
        request_date: Optional[date] = None,
        book_detail: str = '',
        price: int = 0,
        bank_name: str = '',
        account_number: str = '',
        account_holder: str = '',
    ) -> CreateRequestResult:
        student_name = (student_name or '').strip()
        book_name = (book_name or '').strip()
        teacher_name = (teacher_name or '').strip()

        if not student_name or not book_name:
            error = ValidationFailure("학생 이름과 교재명은 필수입니다.")
            return self.failure(CreateRequestResult, error)

        if price is None or price < 0:
            error = ValidationFailure("가격은 0 이상이어야 합니다.")
            return self.failure(CreateRequestResult, error)

        account = {
            'bank_name': bank_name,
            'account_number': account_number,
            'account_holder': account_holder,
        }
        if not any(account.values()):
            account = self._default_account()

        now = self._clock.now()
        request_id = build_request_id(teacher_name, student_name, book_name, id_timestamp(now))

        data = {
            'id': request_id,
            'student_name': student_name,
            'teacher_name': teacher_name,
            'request_date': request_date or local_date(now),
            'book_name': book_name,
            'book_detail': book_detail or '',
            'price': price,
            'created_at': now,
            **account,
        }

        try:
            record = self._store.create(data)
        except ServiceError as e:
            self.log_warning(
                "Request not created",
                request_id=request_id,
                error_code=e.code
            )
            return self.failure(CreateRequestResult, e, details=e.details)

        self.publish_event('request.created', {
            'request_id': record.id,
            'student_name': record.student_name,
            'book_name': record.book_name,
        })

        self.log_info(
            "Request created",
            request_id=record.id,
            student_name=record.student_name
        )

        return CreateRequestResult(success=True, request=to_dict(record))

    def _default_account(self) -> Dict[str, str]:
        from apps.catalog.models import AccountSettings

        settings = AccountSettings.load()
        return {field: getattr(settings, field) for field in ACCOUNT_FIELDS}
