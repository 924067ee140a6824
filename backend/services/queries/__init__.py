# Queries package (Read operations)
from .base import BaseQuery
from .get_requests import GetRequestsQuery
from .get_request_detail import GetRequestDetailQuery
from .get_status_counts import GetStatusCountsQuery
from .get_pending_sync_requests import GetPendingSyncRequestsQuery
from .get_sync_history import GetSyncHistoryQuery
from .get_textbooks import GetTextbooksQuery, GetTextbookSelectionQuery
from .get_account_settings import GetAccountSettingsQuery
from .get_roster import GetStudentsQuery, GetTeachersQuery

__all__ = [
    'BaseQuery',
    'GetRequestsQuery',
    'GetRequestDetailQuery',
    'GetStatusCountsQuery',
    'GetPendingSyncRequestsQuery',
    'GetSyncHistoryQuery',
    'GetTextbooksQuery',
    'GetTextbookSelectionQuery',
    'GetAccountSettingsQuery',
    'GetStudentsQuery',
    'GetTeachersQuery',
]
