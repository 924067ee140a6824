"""
Get Request Detail Query - a single request with derived fields.
"""
from typing import Optional, Dict, Any
from dataclasses import dataclass

from services.exceptions import ServiceError
from services.store import to_dict

from .base import BaseQuery


@dataclass
class GetRequestDetailResult:
    found: bool
    request: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetRequestDetailQuery(BaseQuery[GetRequestDetailResult]):
    """요청서 상세 조회"""

    def execute(self, request_id: str) -> GetRequestDetailResult:
        try:
            record = self._store.get(request_id)
        except ServiceError as e:
            return GetRequestDetailResult(found=False, error=e.message, error_code=e.code)

        return GetRequestDetailResult(found=True, request=to_dict(record))
