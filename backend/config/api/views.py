"""
API views (non-viewset endpoints).
"""
import logging

from django.db import DatabaseError, connection
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint for load balancers and monitoring.

    The sync log lives in the cache, so a cache failure is reported but
    does not make the service unhealthy.

    Returns:
        200 OK if the database answers
        503 Service Unavailable otherwise
    """
    health = {
        'status': 'healthy',
        'checks': {}
    }

    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        health['checks']['database'] = 'ok'
    except DatabaseError as e:
        logger.error(f"Health check database failure: {e}")
        health['status'] = 'unhealthy'
        health['checks']['database'] = str(e)

    try:
        from infrastructure.bootstrap import get_container
        from infrastructure.cache import Cache
        cache = get_container().get(Cache)
        cache.set('health_check', 'ok', ttl=10)
        if cache.get('health_check') == 'ok':
            health['checks']['cache'] = 'ok'
        else:
            health['checks']['cache'] = 'read failed'
    except Exception as e:
        logger.warning(f"Health check cache failure: {e}")
        health['checks']['cache'] = f'error: {e}'

    status_code = 200 if health['status'] == 'healthy' else 503
    return Response(health, status=status_code)
