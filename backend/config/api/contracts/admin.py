"""
Request contracts for the admin gate.
"""
from pydantic import BaseModel, Field


class UnlockBody(BaseModel):
    """POST /admin/unlock"""
    secret: str = Field(min_length=1, max_length=200)
