from django.contrib import admin
from .models import Textbook, AccountSettings


@admin.register(Textbook)
class TextbookAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'grade', 'difficulty', 'price']
    list_filter = ['category']
    search_fields = ['name', 'grade', 'difficulty']


@admin.register(AccountSettings)
class AccountSettingsAdmin(admin.ModelAdmin):
    list_display = ['bank_name', 'account_number', 'account_holder', 'updated_at']
    readonly_fields = ['updated_at']
