"""
Development settings for the textbook request desk.

Runs against the docker-compose services (db, redis, rabbitmq). Set
USE_FAKES=true to run without Redis and RabbitMQ.
"""
from .base import *

DEBUG = True

ALLOWED_HOSTS = ['*']

DATABASES['default']['HOST'] = os.environ.get('DB_HOST', 'db')

# Unlocking must work out of the box on a developer machine
ADMIN_SECRET = ADMIN_SECRET or 'dev-admin-secret'

STATIC_ROOT = os.getenv('STATIC_ROOT', os.path.join(BASE_DIR, 'staticfiles'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'colored': {
            '()': 'infrastructure.logging.DevelopmentFormatter',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'colored',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'services': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['console'],
            'level': os.environ.get('SQL_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
