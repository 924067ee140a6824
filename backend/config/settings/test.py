"""
Test settings: SQLite in memory, in-process fakes for Redis and RabbitMQ.
"""
import os

os.environ.setdefault('USE_FAKES', 'true')

from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ADMIN_SECRET = 'test-admin-secret'
SYNC_API_SECRET = 'test-sync-secret'
ADMIN_UNLOCK_MAX_ATTEMPTS = 3
SYNC_HISTORY_LIMIT = 50
EXTENSION_LATEST_VERSION = '1.2.0'
GEMINI_API_KEY = ''

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {'class': 'logging.NullHandler'},
    },
    'root': {
        'handlers': ['null'],
        'level': 'WARNING',
    },
}
