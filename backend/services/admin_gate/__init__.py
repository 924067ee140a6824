from .service import AdminGateService, UnlockResult, ADMIN_ROLE

__all__ = ['AdminGateService', 'UnlockResult', 'ADMIN_ROLE']
