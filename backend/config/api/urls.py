"""
API URL configuration for the textbook request desk.
"""
from django.urls import path, include

from .views import health_check
from .viewsets import (
    RequestsViewSet,
    DashboardViewSet,
    AdminGateViewSet,
    TextbookViewSet,
    AccountSettingsViewSet,
    RosterViewSet,
)

urlpatterns = [
    path('health/', health_check, name='health-check'),

    # Textbook requests
    path('requests/', RequestsViewSet.as_view({'get': 'list', 'post': 'create'}), name='requests'),
    path('requests/bulk-status', RequestsViewSet.as_view({'post': 'bulk_status'}), name='requests-bulk-status'),
    path('requests/<str:pk>/', RequestsViewSet.as_view({'get': 'retrieve', 'delete': 'destroy'}), name='request-detail'),
    path('requests/<str:pk>/status', RequestsViewSet.as_view({'patch': 'update_status'}), name='request-status'),
    path('requests/<str:pk>/message', RequestsViewSet.as_view({'post': 'parent_message'}), name='request-message'),

    # Dashboard stats (admin)
    path('dashboard/stats', DashboardViewSet.as_view({'get': 'list'}), name='dashboard-stats'),

    # Admin gate
    path('admin/unlock', AdminGateViewSet.as_view({'post': 'unlock'}), name='admin-unlock'),
    path('admin/lock', AdminGateViewSet.as_view({'post': 'lock'}), name='admin-lock'),

    # Catalog
    path('catalog/textbooks/', TextbookViewSet.as_view({'get': 'list', 'post': 'create'}), name='textbooks'),
    path('catalog/textbooks/<int:pk>/', TextbookViewSet.as_view({'put': 'update', 'delete': 'destroy'}), name='textbook-detail'),
    path('catalog/textbooks/<int:pk>/selection', TextbookViewSet.as_view({'get': 'selection'}), name='textbook-selection'),

    # Settings
    path('settings/account', AccountSettingsViewSet.as_view({'get': 'retrieve', 'put': 'update'}), name='account-settings'),

    # Roster (autocomplete)
    path('roster/students', RosterViewSet.as_view({'get': 'students'}), name='roster-students'),
    path('roster/teachers', RosterViewSet.as_view({'get': 'teachers'}), name='roster-teachers'),

    # Browser extension
    path('sync/', include('config.api.urls_sync')),
]
