"""
DRF permissions for the admin gate and the browser extension.
"""
import hmac

from django.conf import settings
from rest_framework.permissions import BasePermission

from .authentication import AdminPrincipal

SYNC_SECRET_HEADER = 'HTTP_X_SYNC_SECRET'


class IsAdminToken(BasePermission):
    """Status mutation and the dashboard need an unlocked admin session."""
    message = '관리자 모드에서만 사용할 수 있습니다.'

    def has_permission(self, request, view):
        return isinstance(request.user, AdminPrincipal)


class HasSyncSecret(BasePermission):
    """The extension proves itself with the X-Sync-Secret header."""
    message = '동기화 키가 올바르지 않습니다.'

    def has_permission(self, request, view):
        expected = getattr(settings, 'SYNC_API_SECRET', '')
        provided = request.META.get(SYNC_SECRET_HEADER, '')
        if not expected or not provided:
            return False
        return hmac.compare_digest(provided.encode(), expected.encode())
