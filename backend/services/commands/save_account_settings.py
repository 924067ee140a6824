"""
Save Account Settings Command - academy bank account used on new requests.

PUT /settings/account
"""
from typing import Optional, Dict
from dataclasses import dataclass

from .base import BaseCommand


@dataclass
class SaveAccountSettingsResult:
    success: bool
    settings: Optional[Dict[str, str]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class SaveAccountSettingsCommand(BaseCommand[SaveAccountSettingsResult]):
    """입금 계좌 설정 저장 (전체 덮어쓰기)"""

    def execute(
        self,
        bank_name: str = '',
        account_number: str = '',
        account_holder: str = '',
    ) -> SaveAccountSettingsResult:
        from apps.catalog.models import AccountSettings

        values = {
            'bank_name': (bank_name or '').strip(),
            'account_number': (account_number or '').strip(),
            'account_holder': (account_holder or '').strip(),
        }

        AccountSettings.objects.update_or_create(
            pk=AccountSettings.SINGLETON_ID,
            defaults=values
        )

        self.log_info("Account settings saved", bank_name=values['bank_name'])

        return SaveAccountSettingsResult(success=True, settings=values)
