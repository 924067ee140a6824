"""
Record Store Facade for textbook requests.

All reads and writes of TextbookRequest go through RequestStore. Database
errors surface as BackendFailure; nothing is retried here.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Q

from services.exceptions import (
    AlreadyExists,
    BackendFailure,
    RecordNotFound,
    ValidationFailure,
)
from services.lifecycle import is_fully_complete

logger = logging.getLogger(__name__)

FILTER_INCOMPLETE = 'incomplete'
FILTER_COMPLETE = 'complete'
FILTERS = (FILTER_INCOMPLETE, FILTER_COMPLETE)

MAX_PAGE_SIZE = 100

# Evaluated in the database on every call; fully_complete is never a column.
FULLY_COMPLETE_Q = Q(is_completed=True, is_paid=True, is_ordered=True)


def to_dict(record) -> Dict[str, Any]:
    """API representation of a request, including derived fields."""
    def iso(value):
        return value.isoformat() if value else None

    return {
        'id': record.id,
        'student_name': record.student_name,
        'teacher_name': record.teacher_name,
        'request_date': iso(record.request_date),
        'book_name': record.book_name,
        'book_detail': record.book_detail,
        'price': record.price,
        'bank_name': record.bank_name,
        'account_number': record.account_number,
        'account_holder': record.account_holder,
        'created_at': iso(record.created_at),
        'is_completed': record.is_completed,
        'completed_at': iso(record.completed_at),
        'is_paid': record.is_paid,
        'paid_at': iso(record.paid_at),
        'is_ordered': record.is_ordered,
        'ordered_at': iso(record.ordered_at),
        'fully_complete': is_fully_complete(record),
        'export_filename': record.export_filename,
    }


@dataclass
class RequestPage:
    """One page of a filtered request listing."""
    requests: List[Any] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 0
    current_page: int = 1
    opposite_count: int = 0

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1


@dataclass
class StatusCounts:
    """Records still missing each status, plus the total."""
    registered: int = 0
    paid: int = 0
    ordered: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'registered': self.registered,
            'paid': self.paid,
            'ordered': self.ordered,
            'total': self.total,
        }


class RequestStore:
    """교재 요청서 저장소"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    @property
    def _model(self):
        from apps.textbook_requests.models import TextbookRequest
        return TextbookRequest

    def create(self, data: Dict[str, Any]):
        """
        Store a new request under data['id'].

        Raises:
            AlreadyExists: a request with this id is already stored
            BackendFailure: database error
        """
        request_id = data.get('id')
        if not request_id:
            raise ValidationFailure('요청 ID가 없습니다.')

        try:
            with transaction.atomic():
                if self._model.objects.filter(id=request_id).exists():
                    raise AlreadyExists(details={'id': request_id})
                return self._model.objects.create(**data)
        except IntegrityError as e:
            raise AlreadyExists(details={'id': request_id}) from e
        except DatabaseError as e:
            self._logger.error(f"Failed to create request: {e}", extra={'request_id': request_id})
            raise BackendFailure() from e

    def get(self, request_id: str):
        try:
            return self._model.objects.get(id=request_id)
        except self._model.DoesNotExist:
            raise RecordNotFound(details={'id': request_id})
        except DatabaseError as e:
            self._logger.error(f"Failed to load request: {e}", extra={'request_id': request_id})
            raise BackendFailure() from e

    def all(self) -> list:
        """Every stored request, newest first."""
        try:
            return list(self._model.objects.order_by('-created_at'))
        except DatabaseError as e:
            self._logger.error(f"Failed to load requests: {e}")
            raise BackendFailure() from e

    def list(
        self,
        filter: str = FILTER_INCOMPLETE,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
    ) -> RequestPage:
        """
        One page of the `incomplete` or `complete` partition, newest first.

        `opposite_count` is the size of the other partition under the same
        search, for tab badges.
        """
        if filter not in FILTERS:
            raise ValidationFailure(f"filter는 {', '.join(FILTERS)} 중 하나여야 합니다.")
        if page < 1:
            raise ValidationFailure('page는 1 이상이어야 합니다.')
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationFailure(f'page_size는 1~{MAX_PAGE_SIZE} 사이여야 합니다.')

        queryset = self._model.objects.all()
        if search:
            term = search.strip()
            queryset = queryset.filter(
                Q(student_name__icontains=term) |
                Q(book_name__icontains=term) |
                Q(teacher_name__icontains=term)
            )

        if filter == FILTER_COMPLETE:
            selected, opposite = queryset.filter(FULLY_COMPLETE_Q), queryset.exclude(FULLY_COMPLETE_Q)
        else:
            selected, opposite = queryset.exclude(FULLY_COMPLETE_Q), queryset.filter(FULLY_COMPLETE_Q)

        try:
            total_count = selected.count()
            start = (page - 1) * page_size
            requests = list(selected.order_by('-created_at')[start:start + page_size])
            opposite_count = opposite.count()
        except DatabaseError as e:
            self._logger.error(f"Failed to list requests: {e}", extra={'filter': filter, 'page': page})
            raise BackendFailure() from e

        return RequestPage(
            requests=requests,
            total_count=total_count,
            total_pages=math.ceil(total_count / page_size),
            current_page=page,
            opposite_count=opposite_count,
        )

    def update(self, request_id: str, fields: Dict[str, Any]):
        """
        Merge fields into a stored request and return the fresh record.

        Only the given columns are written, so concurrent writers touching
        other fields do not clobber each other; the last write to the same
        field wins.
        """
        try:
            if fields:
                updated = self._model.objects.filter(id=request_id).update(**fields)
                if not updated:
                    raise RecordNotFound(details={'id': request_id})
            return self.get(request_id)
        except DatabaseError as e:
            self._logger.error(f"Failed to update request: {e}", extra={'request_id': request_id})
            raise BackendFailure() from e

    def delete(self, request_id: str) -> None:
        """Hard delete. Exported images are not touched."""
        try:
            deleted, _ = self._model.objects.filter(id=request_id).delete()
        except DatabaseError as e:
            self._logger.error(f"Failed to delete request: {e}", extra={'request_id': request_id})
            raise BackendFailure() from e
        if not deleted:
            raise RecordNotFound(details={'id': request_id})

    def count_by_status(self) -> StatusCounts:
        from django.db.models import Count

        try:
            counts = self._model.objects.aggregate(
                registered=Count('id', filter=Q(is_completed=False)),
                paid=Count('id', filter=Q(is_paid=False)),
                ordered=Count('id', filter=Q(is_ordered=False)),
                total=Count('id'),
            )
        except DatabaseError as e:
            self._logger.error(f"Failed to count requests: {e}")
            raise BackendFailure() from e

        return StatusCounts(**counts)
