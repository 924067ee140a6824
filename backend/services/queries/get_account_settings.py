"""
Get Account Settings Query - academy bank account.

GET /settings/account
"""
from typing import Dict
from dataclasses import dataclass, field

from .base import BaseQuery


@dataclass
class GetAccountSettingsResult:
    settings: Dict[str, str] = field(default_factory=dict)


class GetAccountSettingsQuery(BaseQuery[GetAccountSettingsResult]):
    """입금 계좌 설정 조회. 저장된 값이 없으면 빈 문자열."""

    def execute(self) -> GetAccountSettingsResult:
        from apps.catalog.models import AccountSettings

        account = AccountSettings.load()
        return GetAccountSettingsResult(settings={
            'bank_name': account.bank_name,
            'account_number': account.account_number,
            'account_holder': account.account_holder,
        })
