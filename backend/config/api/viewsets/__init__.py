# ViewSets package
from .base import BaseViewSet
from .requests import RequestsViewSet
from .dashboard import DashboardViewSet
from .admin_gate import AdminGateViewSet
from .catalog import TextbookViewSet
from .account import AccountSettingsViewSet
from .roster import RosterViewSet
from .sync import SyncViewSet

__all__ = [
    'BaseViewSet',
    'RequestsViewSet',
    'DashboardViewSet',
    'AdminGateViewSet',
    'TextbookViewSet',
    'AccountSettingsViewSet',
    'RosterViewSet',
    'SyncViewSet',
]
