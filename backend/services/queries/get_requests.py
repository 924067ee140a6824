"""
Get Requests Query - one page of the request history.

GET /requests
"""
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from services.exceptions import ServiceError
from services.store import FILTER_INCOMPLETE, to_dict

from .base import BaseQuery


@dataclass
class GetRequestsResult:
    """Result of listing requests."""
    success: bool
    requests: List[Dict[str, Any]] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 0
    current_page: int = 1
    has_next_page: bool = False
    has_prev_page: bool = False
    opposite_count: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetRequestsQuery(BaseQuery[GetRequestsResult]):
    """
    요청 내역 조회 (미완료/완료 탭)

    GET /requests
    """

    def execute(
        self,
        filter: str = FILTER_INCOMPLETE,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
    ) -> GetRequestsResult:
        try:
            result = self._store.list(filter=filter, page=page, page_size=page_size, search=search)
        except ServiceError as e:
            return GetRequestsResult(success=False, error=e.message, error_code=e.code)

        return GetRequestsResult(
            success=True,
            requests=[to_dict(r) for r in result.requests],
            total_count=result.total_count,
            total_pages=result.total_pages,
            current_page=result.current_page,
            has_next_page=result.has_next_page,
            has_prev_page=result.has_prev_page,
            opposite_count=result.opposite_count,
        )
