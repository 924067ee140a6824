from django.contrib import admin
from .models import TextbookRequest


@admin.register(TextbookRequest)
class TextbookRequestAdmin(admin.ModelAdmin):
    list_display = ['student_name', 'book_name', 'teacher_name', 'price',
                    'is_completed', 'is_paid', 'is_ordered', 'created_at']
    list_filter = ['is_completed', 'is_paid', 'is_ordered', 'request_date']
    search_fields = ['student_name', 'book_name', 'teacher_name']
    readonly_fields = ['id', 'created_at', 'completed_at', 'paid_at', 'ordered_at']

    fieldsets = (
        ('요청 정보', {
            'fields': ('id', 'student_name', 'teacher_name', 'request_date')
        }),
        ('교재', {
            'fields': ('book_name', 'book_detail', 'price')
        }),
        ('입금 계좌', {
            'fields': ('bank_name', 'account_number', 'account_holder')
        }),
        ('상태', {
            'fields': ('is_completed', 'completed_at', 'is_paid', 'paid_at',
                       'is_ordered', 'ordered_at', 'created_at')
        }),
    )
