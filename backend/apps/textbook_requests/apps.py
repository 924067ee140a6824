from django.apps import AppConfig


class TextbookRequestsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.textbook_requests'
    label = 'textbook_requests'
    verbose_name = '교재 요청'
