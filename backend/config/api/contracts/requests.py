"""
Request contracts for textbook requests.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CreateRequestBody(BaseModel):
    """POST /requests"""
    student_name: str = Field(min_length=1, max_length=100)
    book_name: str = Field(min_length=1, max_length=200)
    teacher_name: str = Field(default='', max_length=100)
    request_date: Optional[date] = None
    book_detail: str = Field(default='', max_length=200)
    price: int = Field(default=0, ge=0)
    bank_name: str = Field(default='', max_length=50)
    account_number: str = Field(default='', max_length=50)
    account_holder: str = Field(default='', max_length=50)

    @field_validator('student_name', 'book_name')
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('must not be blank')
        return value.strip()


class UpdateStatusBody(BaseModel):
    """PATCH /requests/{id}/status - only the flags present are changed."""
    model_config = ConfigDict(extra='forbid')

    is_completed: Optional[bool] = None
    is_paid: Optional[bool] = None
    is_ordered: Optional[bool] = None

    @model_validator(mode='after')
    def at_least_one(self):
        if not self.changes():
            raise ValueError('at least one of is_completed, is_paid, is_ordered is required')
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class BulkStatusBody(BaseModel):
    """POST /requests/bulk-status"""
    ids: List[str] = Field(min_length=1, max_length=200)
    is_completed: bool


class ListRequestsParams(BaseModel):
    """GET /requests query string"""
    filter: str = Field(default='incomplete', pattern='^(incomplete|complete)$')
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
    search: Optional[str] = None
