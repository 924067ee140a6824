from django.apps import AppConfig


class RosterConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.roster'
    label = 'roster'
    verbose_name = '학생/선생님 명단'
