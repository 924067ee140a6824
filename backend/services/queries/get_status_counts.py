"""
Get Status Counts Query - how many requests still miss each status.

GET /dashboard/stats
"""
from typing import Optional, Dict
from dataclasses import dataclass, field

from services.exceptions import ServiceError

from .base import BaseQuery


@dataclass
class GetStatusCountsResult:
    success: bool
    counts: Dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetStatusCountsQuery(BaseQuery[GetStatusCountsResult]):
    """
    미처리 현황

    registered / paid / ordered count requests whose flag is still false.
    """

    def execute(self) -> GetStatusCountsResult:
        try:
            counts = self._store.count_by_status()
        except ServiceError as e:
            return GetStatusCountsResult(success=False, error=e.message, error_code=e.code)

        return GetStatusCountsResult(success=True, counts=counts.to_dict())
