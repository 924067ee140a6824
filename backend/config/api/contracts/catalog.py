"""
Request contracts for the textbook catalog and account settings.
"""
from pydantic import BaseModel, Field


class TextbookBody(BaseModel):
    """POST /catalog/textbooks and PUT /catalog/textbooks/{id}"""
    name: str = Field(min_length=1, max_length=200)
    price: int = Field(gt=0)
    category: str = Field(default='elementary', pattern='^(elementary|middle|high)$')
    grade: str = Field(default='', max_length=50)
    difficulty: str = Field(default='', max_length=50)


class AccountSettingsBody(BaseModel):
    """PUT /settings/account"""
    bank_name: str = Field(default='', max_length=50)
    account_number: str = Field(default='', max_length=50)
    account_holder: str = Field(default='', max_length=50)
