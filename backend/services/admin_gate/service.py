"""
Admin Gate Service - unlocks status editing with a shared secret.

Flow:
1. Operator enters the academy secret -> unlock()
2. A signed admin token (PyJWT, HS256) is returned
3. Status endpoints require the token until it expires or lock() revokes it

This is a convenience gate for shared office machines, not a security
boundary: there are no user accounts behind it.
"""
import hashlib
import hmac
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import jwt
from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = 'HS256'
ADMIN_ROLE = 'admin'


@dataclass
class UnlockResult:
    """Result of an unlock attempt."""
    success: bool
    token: Optional[str] = None
    expires_in: int = 0
    remaining_attempts: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class AdminGateService:
    """관리자 잠금 해제"""

    ATTEMPT_WINDOW_SECONDS = 600

    def __init__(
        self,
        cache=None,
        secret: Optional[str] = None,
        token_hours: Optional[int] = None,
        max_attempts: Optional[int] = None,
    ):
        self._cache = cache
        self._secret = secret if secret is not None else getattr(settings, 'ADMIN_SECRET', '')
        self._token_hours = token_hours or getattr(settings, 'ADMIN_TOKEN_HOURS', 8)
        self._max_attempts = max_attempts or getattr(settings, 'ADMIN_UNLOCK_MAX_ATTEMPTS', 5)

    def unlock(self, secret: str, client_key: str = 'anonymous') -> UnlockResult:
        """
        Exchange the shared secret for an admin token.

        Args:
            secret: Secret typed by the operator
            client_key: Rate-limit bucket, usually the client IP
        """
        if not self._secret:
            return UnlockResult(
                success=False,
                error="관리자 비밀번호가 설정되지 않았습니다.",
                error_code="ADMIN_SECRET_NOT_CONFIGURED"
            )

        attempts = self._failed_attempts(client_key)
        if attempts >= self._max_attempts:
            return UnlockResult(
                success=False,
                remaining_attempts=0,
                error="시도 횟수를 초과했습니다. 잠시 후 다시 시도해 주세요.",
                error_code="TOO_MANY_ATTEMPTS"
            )

        if not hmac.compare_digest((secret or '').encode(), self._secret.encode()):
            attempts = self._record_failure(client_key, attempts)
            logger.warning("Admin unlock rejected", extra={'attempts': attempts})
            return UnlockResult(
                success=False,
                remaining_attempts=max(self._max_attempts - attempts, 0),
                error="비밀번호가 올바르지 않습니다.",
                error_code="INVALID_SECRET"
            )

        if self._cache:
            self._cache.delete(self._attempts_key(client_key))

        expires_in = int(self._token_hours * 3600)
        token = self._generate_token(expires_in)
        logger.info("Admin unlocked")

        return UnlockResult(success=True, token=token, expires_in=expires_in)

    def verify(self, token: str) -> dict:
        """
        Decode an admin token.

        Raises:
            jwt.InvalidTokenError: expired, tampered, revoked or not an admin token
        """
        if self.is_token_revoked(token):
            raise jwt.InvalidTokenError('revoked')

        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[TOKEN_ALGORITHM])
        if payload.get('role') != ADMIN_ROLE:
            raise jwt.InvalidTokenError('not an admin token')
        return payload

    def lock(self, token: str) -> bool:
        """
        Revoke a token until its natural expiry.

        Returns:
            True if the token was revoked, False if it was already unusable
        """
        if not self._cache:
            return False

        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[TOKEN_ALGORITHM])
        except jwt.InvalidTokenError:
            return False

        ttl = int(payload['exp'] - timezone.now().timestamp())
        if ttl <= 0:
            return False

        self._cache.set_json(self._revoked_key(token), True, ttl=ttl)
        logger.info("Admin locked")
        return True

    def is_token_revoked(self, token: str) -> bool:
        if not self._cache:
            return False
        return self._cache.exists(self._revoked_key(token))

    def _generate_token(self, expires_in: int) -> str:
        issued_at = timezone.now()
        payload = {
            'role': ADMIN_ROLE,
            'iat': issued_at,
            'exp': issued_at + timedelta(seconds=expires_in),
        }
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=TOKEN_ALGORITHM)

    def _failed_attempts(self, client_key: str) -> int:
        if not self._cache:
            return 0
        return self._cache.get_json(self._attempts_key(client_key)) or 0

    def _record_failure(self, client_key: str, attempts: int) -> int:
        attempts += 1
        if self._cache:
            self._cache.set_json(
                self._attempts_key(client_key),
                attempts,
                ttl=self.ATTEMPT_WINDOW_SECONDS
            )
        return attempts

    @staticmethod
    def _attempts_key(client_key: str) -> str:
        return f"admin_unlock:{hashlib.md5(client_key.encode()).hexdigest()}"

    @staticmethod
    def _revoked_key(token: str) -> str:
        return f"admin_revoked:{hashlib.sha256(token.encode()).hexdigest()}"
