from .base import ErrorResponse
from .requests import CreateRequestBody, UpdateStatusBody, BulkStatusBody, ListRequestsParams
from .sync import PaymentStatusBody
from .catalog import TextbookBody, AccountSettingsBody
from .admin import UnlockBody

__all__ = [
    'ErrorResponse',
    'CreateRequestBody',
    'UpdateStatusBody',
    'BulkStatusBody',
    'ListRequestsParams',
    'PaymentStatusBody',
    'TextbookBody',
    'AccountSettingsBody',
    'UnlockBody',
]
