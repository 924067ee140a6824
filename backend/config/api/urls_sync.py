"""
URL configuration for the MakeEdu browser extension.
Mounted under /api/v1/sync/; every view checks the X-Sync-Secret header.
"""
from django.urls import path

from .viewsets import SyncViewSet

urlpatterns = [
    path('connection', SyncViewSet.as_view({'get': 'connection'}), name='sync-connection'),
    path('version', SyncViewSet.as_view({'get': 'version'}), name='sync-version'),
    path('requests', SyncViewSet.as_view({'get': 'pending_requests'}), name='sync-requests'),
    path('payment-status', SyncViewSet.as_view({'post': 'payment_status'}), name='sync-payment-status'),
    path('history', SyncViewSet.as_view({'get': 'history'}), name='sync-history'),
]
