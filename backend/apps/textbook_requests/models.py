"""
Textbook Request Domain Models

이 app은 교재 구매 요청서를 다룹니다:
- TextbookRequest (교재 요청서 + 등록/납부/주문 상태)

참고: 다른 app의 모델을 FK로 참조하지 않습니다.
선생님/학생 이름은 요청서 작성 시점의 문자열로 저장합니다.
"""
from django.db import models


class TextbookRequest(models.Model):
    """교재 구매 요청서"""

    id = models.CharField(
        primary_key=True,
        max_length=255,
        editable=False,
        verbose_name='요청 ID',
        help_text='선생님_학생_교재명_YYYYMMDDHHmmssSSS'
    )

    student_name = models.CharField(max_length=100, verbose_name='학생 이름')
    teacher_name = models.CharField(max_length=100, blank=True, verbose_name='담당 선생님')
    request_date = models.DateField(verbose_name='요청일')

    book_name = models.CharField(max_length=200, verbose_name='교재명')
    book_detail = models.CharField(max_length=200, blank=True, verbose_name='상세 내용')
    price = models.PositiveIntegerField(default=0, verbose_name='가격')

    bank_name = models.CharField(max_length=50, blank=True, verbose_name='은행명')
    account_number = models.CharField(max_length=50, blank=True, verbose_name='계좌번호')
    account_holder = models.CharField(max_length=50, blank=True, verbose_name='예금주')

    created_at = models.DateTimeField(verbose_name='작성 시각')

    is_completed = models.BooleanField(default=False, verbose_name='등록 완료')
    completed_at = models.DateTimeField(null=True, blank=True, verbose_name='등록 시각')
    is_paid = models.BooleanField(default=False, verbose_name='납부 완료')
    paid_at = models.DateTimeField(null=True, blank=True, verbose_name='납부 시각')
    is_ordered = models.BooleanField(default=False, verbose_name='주문 완료')
    ordered_at = models.DateTimeField(null=True, blank=True, verbose_name='주문 시각')

    class Meta:
        verbose_name = '교재 요청'
        verbose_name_plural = '교재 요청 목록'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['created_at'], name='treq_created_idx'),
            models.Index(fields=['student_name'], name='treq_student_idx'),
            models.Index(fields=['is_completed', 'is_paid', 'is_ordered'], name='treq_status_idx'),
        ]

    def __str__(self):
        return f'{self.student_name} - {self.book_name} ({self.request_date})'

    @property
    def export_filename(self) -> str:
        return f'{self.request_date}_{self.student_name}_{self.book_name}.png'
