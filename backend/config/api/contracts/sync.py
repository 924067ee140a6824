"""
Request contracts for the browser extension (MakeEdu sync).
"""
from typing import Optional

from pydantic import BaseModel, Field


class PaymentStatusBody(BaseModel):
    """
    POST /sync/payment-status

    request_id is only sent to resolve an ambiguous match.
    """
    student_name: str = Field(min_length=1, max_length=100)
    book_name: str = Field(min_length=1, max_length=200)
    is_paid: bool
    request_id: Optional[str] = None
