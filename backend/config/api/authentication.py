"""
DRF authentication for the admin gate token.
"""
import jwt
from rest_framework import authentication, exceptions


class AdminPrincipal:
    """
    Stand-in user for a request carrying a valid admin token.

    There are no staff accounts; holding the token is the whole identity.
    """
    is_authenticated = True
    is_anonymous = False

    def __init__(self, token: str, payload: dict):
        self.token = token
        self.payload = payload

    def __str__(self):
        return 'admin'


class AdminTokenAuthentication(authentication.BaseAuthentication):
    """
    Admin token authentication.
    
    Authorization header format:
    - Bearer <admin_token>
    
    The token comes from POST /admin/unlock and is revoked by POST /admin/lock.
    """
    
    def authenticate(self, request):
        auth_header = request.META.get('HTTP_AUTHORIZATION', '')
        
        if not auth_header.startswith('Bearer '):
            return None
        
        token = auth_header[7:]  # Remove 'Bearer ' prefix
        
        if not token:
            return None
        
        from infrastructure.bootstrap import get_container
        from services.admin_gate import AdminGateService
        
        gate = get_container().get(AdminGateService)
        
        try:
            payload = gate.verify(token)
        except jwt.ExpiredSignatureError:
            raise exceptions.AuthenticationFailed('관리자 모드가 만료되었습니다.')
        except jwt.InvalidTokenError:
            raise exceptions.AuthenticationFailed('관리자 토큰이 올바르지 않습니다.')
        
        return (AdminPrincipal(token, payload), token)
    
    def authenticate_header(self, request):
        return 'Bearer'
