"""
Base settings for the textbook request desk.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-change-this-in-production')

DEBUG = os.environ.get('DEBUG', 'True').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third party apps
    'corsheaders',
    'rest_framework',

    # Local apps
    'apps.textbook_requests',
    'apps.catalog',
    'apps.roster',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.environ.get('DB_NAME', 'textbook_desk'),
        'USER': os.environ.get('DB_USER', 'textbook_desk'),
        'PASSWORD': os.environ.get('DB_PASSWORD', 'textbook_desk'),
        'HOST': os.environ.get('DB_HOST', 'localhost'),
        'PORT': os.environ.get('DB_PORT', '5432'),
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'ko-kr'
TIME_ZONE = 'Asia/Seoul'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'config.api.authentication.AdminTokenAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'EXCEPTION_HANDLER': 'config.api.viewsets.base.api_exception_handler',
}

# CORS - the browser extension calls the sync API from the MakeEdu page
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'dnt',
    'origin',
    'user-agent',
    'x-csrftoken',
    'x-requested-with',
    'x-sync-secret',
]
CORS_ALLOW_METHODS = [
    'DELETE',
    'GET',
    'OPTIONS',
    'PATCH',
    'POST',
    'PUT',
]

# Infrastructure settings
_redis_host = os.environ.get('REDIS_HOST', 'localhost')
_redis_port = os.environ.get('REDIS_PORT', '6379')
_redis_password = os.environ.get('REDIS_PASSWORD', '')
REDIS_URL = os.environ.get('REDIS_URL', f'redis://:{_redis_password}@{_redis_host}:{_redis_port}/0' if _redis_password else f'redis://{_redis_host}:{_redis_port}/0')

_rabbitmq_user = os.environ.get('RABBITMQ_USER', 'guest')
_rabbitmq_pass = os.environ.get('RABBITMQ_PASS', 'guest')
_rabbitmq_host = os.environ.get('RABBITMQ_HOST', 'localhost')
_rabbitmq_port = os.environ.get('RABBITMQ_PORT', '5672')
RABBITMQ_URL = os.environ.get('RABBITMQ_URL', f'amqp://{_rabbitmq_user}:{_rabbitmq_pass}@{_rabbitmq_host}:{_rabbitmq_port}/')
EVENT_EXCHANGE = os.environ.get('EVENT_EXCHANGE', 'textbook_events')

# Admin gate
ADMIN_SECRET = os.environ.get('ADMIN_SECRET', '')
ADMIN_TOKEN_HOURS = int(os.environ.get('ADMIN_TOKEN_HOURS', 8))
ADMIN_UNLOCK_MAX_ATTEMPTS = int(os.environ.get('ADMIN_UNLOCK_MAX_ATTEMPTS', 5))

# Browser extension (MakeEdu sync)
SYNC_API_SECRET = os.environ.get('SYNC_API_SECRET', 'dev-sync-secret')
SYNC_HISTORY_LIMIT = int(os.environ.get('SYNC_HISTORY_LIMIT', 50))
EXTENSION_LATEST_VERSION = os.environ.get('EXTENSION_LATEST_VERSION', '1.0.0')
EXTENSION_DOWNLOAD_URL = os.environ.get('EXTENSION_DOWNLOAD_URL', '')

# Request history
REQUESTS_PAGE_SIZE = int(os.environ.get('REQUESTS_PAGE_SIZE', 20))

# Parent message generation
GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY', '')
GEMINI_API_URL = os.environ.get(
    'GEMINI_API_URL',
    'https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent'
)

# Sentry configuration
SENTRY_DSN = os.environ.get('SENTRY_DSN', '')
if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration()],
        traces_sample_rate=0.1,
        send_default_pii=False,
        environment=os.environ.get('ENVIRONMENT', 'development'),
    )
