"""
Catalog ViewSet - textbook list editor and selection.

- GET /catalog/textbooks?category=&search=
- POST /catalog/textbooks
- PUT /catalog/textbooks/{id}
- DELETE /catalog/textbooks/{id}
- GET /catalog/textbooks/{id}/selection
"""
from rest_framework import status

from .base import BaseViewSet
from config.api.contracts import TextbookBody
from services.commands import DeleteTextbookCommand, SaveTextbookCommand
from services.queries import GetTextbooksQuery, GetTextbookSelectionQuery


class TextbookViewSet(BaseViewSet):
    """교재 목록"""

    def list(self, request):
        result = self.get_query(GetTextbooksQuery).execute(
            category=request.query_params.get('category') or None,
            search=request.query_params.get('search') or None,
        )
        return self.success({'textbooks': result.textbooks})

    def create(self, request):
        data, error = self.validate_request(TextbookBody, request.data)
        if error:
            return error

        result = self.get_command(SaveTextbookCommand).execute(**data.model_dump())

        if not result.success:
            return self.result_error(result)

        return self.success({'textbook': result.textbook}, status_code=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        data, error = self.validate_request(TextbookBody, request.data)
        if error:
            return error

        result = self.get_command(SaveTextbookCommand).execute(
            textbook_id=int(pk),
            **data.model_dump()
        )

        if not result.success:
            return self.result_error(result)

        return self.success({'textbook': result.textbook})

    def destroy(self, request, pk=None):
        result = self.get_command(DeleteTextbookCommand).execute(textbook_id=int(pk))

        if not result.success:
            return self.result_error(result)

        return self.success({'success': True})

    def selection(self, request, pk=None):
        """
        교재 선택 시 요청서에 채울 값
        "초5-1 기본 01. 수와 연산" -> book_name "초5-1 기본", book_detail "01. 수와 연산"
        """
        result = self.get_query(GetTextbookSelectionQuery).execute(textbook_id=int(pk))

        if not result.found:
            return self.result_error(result)

        return self.success({
            'book_name': result.book_name,
            'book_detail': result.book_detail,
            'price': result.price,
        })
