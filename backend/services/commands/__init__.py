# Commands package (Write operations)
from .base import BaseCommand
from .create_request import CreateRequestCommand, build_request_id
from .update_request_status import UpdateRequestStatusCommand, BulkUpdateStatusCommand
from .delete_request import DeleteRequestCommand
from .sync_payment_status import SyncPaymentStatusCommand
from .save_textbook import SaveTextbookCommand, DeleteTextbookCommand
from .save_account_settings import SaveAccountSettingsCommand

__all__ = [
    'BaseCommand',
    'CreateRequestCommand',
    'build_request_id',
    'UpdateRequestStatusCommand',
    'BulkUpdateStatusCommand',
    'DeleteRequestCommand',
    'SyncPaymentStatusCommand',
    'SaveTextbookCommand',
    'DeleteTextbookCommand',
    'SaveAccountSettingsCommand',
]
