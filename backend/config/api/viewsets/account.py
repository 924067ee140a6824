"""
Account Settings ViewSet - academy bank account.

- GET /settings/account
- PUT /settings/account
"""
from .base import BaseViewSet
from config.api.contracts import AccountSettingsBody
from services.commands import SaveAccountSettingsCommand
from services.queries import GetAccountSettingsQuery


class AccountSettingsViewSet(BaseViewSet):
    """입금 계좌 설정"""

    def retrieve(self, request):
        result = self.get_query(GetAccountSettingsQuery).execute()
        return self.success(result.settings)

    def update(self, request):
        data, error = self.validate_request(AccountSettingsBody, request.data)
        if error:
            return error

        result = self.get_command(SaveAccountSettingsCommand).execute(**data.model_dump())
        return self.success(result.settings)
