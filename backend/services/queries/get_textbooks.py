"""
Textbook catalog queries.

GET /catalog/textbooks and GET /catalog/textbooks/{id}/selection
"""
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from django.db.models import Q

from services.commands.save_textbook import textbook_to_dict

from .base import BaseQuery


@dataclass
class GetTextbooksResult:
    textbooks: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class GetTextbookSelectionResult:
    """Request form values for a picked textbook."""
    found: bool
    book_name: str = ''
    book_detail: str = ''
    price: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetTextbooksQuery(BaseQuery[GetTextbooksResult]):
    """
    교재 목록 조회

    search matches name, grade or difficulty, case-insensitively.
    """

    def execute(self, category: Optional[str] = None, search: Optional[str] = None) -> GetTextbooksResult:
        from apps.catalog.models import Textbook

        queryset = Textbook.objects.all()

        if category:
            queryset = queryset.filter(category=category)

        if search:
            term = search.strip()
            queryset = queryset.filter(
                Q(name__icontains=term) |
                Q(grade__icontains=term) |
                Q(difficulty__icontains=term)
            )

        return GetTextbooksResult(textbooks=[textbook_to_dict(t) for t in queryset])


class GetTextbookSelectionQuery(BaseQuery[GetTextbookSelectionResult]):
    """교재 선택 → 요청서 교재명/상세/가격"""

    def execute(self, textbook_id: int) -> GetTextbookSelectionResult:
        from apps.catalog.models import Textbook

        try:
            textbook = Textbook.objects.get(id=textbook_id)
        except Textbook.DoesNotExist:
            return GetTextbookSelectionResult(
                found=False,
                error="교재를 찾을 수 없습니다.",
                error_code="TEXTBOOK_NOT_FOUND"
            )

        book_name, book_detail = textbook.split_name()
        return GetTextbookSelectionResult(
            found=True,
            book_name=book_name,
            book_detail=book_detail,
            price=textbook.price
        )
