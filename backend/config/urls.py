"""
URL configuration for the textbook request desk.

URLs are declared at project level, not per app.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('django-admin/', admin.site.urls),
    path('api/v1/', include('config.api.urls')),
]
