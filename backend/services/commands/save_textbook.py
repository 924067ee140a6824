"""
Catalog Commands - create, edit and delete textbooks.

POST /catalog/textbooks, PUT /catalog/textbooks/{id}, DELETE /catalog/textbooks/{id}
"""
from typing import Optional, Dict, Any
from dataclasses import dataclass

from django.db import DatabaseError

from .base import BaseCommand


def textbook_to_dict(textbook) -> Dict[str, Any]:
    return {
        'id': textbook.id,
        'category': textbook.category,
        'grade': textbook.grade,
        'difficulty': textbook.difficulty,
        'name': textbook.name,
        'price': textbook.price,
    }


@dataclass
class SaveTextbookResult:
    success: bool
    textbook: Optional[Dict[str, Any]] = None
    created: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class DeleteTextbookResult:
    success: bool
    error: Optional[str] = None
    error_code: Optional[str] = None


class SaveTextbookCommand(BaseCommand[SaveTextbookResult]):
    """
    교재 추가/수정

    Without textbook_id a new entry is created.
    """

    def execute(
        self,
        name: str,
        price: int,
        category: str = 'elementary',
        grade: str = '',
        difficulty: str = '',
        textbook_id: Optional[int] = None,
    ) -> SaveTextbookResult:
        from apps.catalog.models import Textbook

        name = (name or '').strip()
        if not name or not price:
            return SaveTextbookResult(
                success=False,
                error="교재명과 가격은 필수입니다.",
                error_code="VALIDATION_ERROR"
            )

        if price < 0:
            return SaveTextbookResult(
                success=False,
                error="가격은 0보다 커야 합니다.",
                error_code="VALIDATION_ERROR"
            )

        if category not in Textbook.Category.values:
            return SaveTextbookResult(
                success=False,
                error="과정 값이 올바르지 않습니다.",
                error_code="VALIDATION_ERROR"
            )

        fields = {
            'name': name,
            'price': price,
            'category': category,
            'grade': grade or '',
            'difficulty': difficulty or '',
        }

        try:
            if textbook_id is None:
                textbook = Textbook.objects.create(**fields)
                created = True
            else:
                try:
                    textbook = Textbook.objects.get(id=textbook_id)
                except Textbook.DoesNotExist:
                    return SaveTextbookResult(
                        success=False,
                        error="교재를 찾을 수 없습니다.",
                        error_code="TEXTBOOK_NOT_FOUND"
                    )
                for key, value in fields.items():
                    setattr(textbook, key, value)
                textbook.save()
                created = False
        except DatabaseError as e:
            self.log_error(f"Failed to save textbook: {e}", textbook_id=textbook_id)
            return SaveTextbookResult(
                success=False,
                error="저장소 처리 중 오류가 발생했습니다.",
                error_code="BACKEND_FAILURE"
            )

        self.log_info(
            "Textbook saved",
            textbook_id=textbook.id,
            created=created
        )

        return SaveTextbookResult(success=True, textbook=textbook_to_dict(textbook), created=created)


class DeleteTextbookCommand(BaseCommand[DeleteTextbookResult]):
    """교재 삭제"""

    def execute(self, textbook_id: int) -> DeleteTextbookResult:
        from apps.catalog.models import Textbook

        deleted, _ = Textbook.objects.filter(id=textbook_id).delete()
        if not deleted:
            return DeleteTextbookResult(
                success=False,
                error="교재를 찾을 수 없습니다.",
                error_code="TEXTBOOK_NOT_FOUND"
            )

        self.log_info("Textbook deleted", textbook_id=textbook_id)
        return DeleteTextbookResult(success=True)
