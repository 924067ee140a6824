"""
Catalog Domain Models

이 app은 요청서 작성에 쓰이는 기준 정보를 다룹니다:
- Textbook (교재 목록: 과정/학년/난이도/가격)
- AccountSettings (학원 입금 계좌, 단일 행)
"""
import re

from django.db import models

# "초5-1 기본 01. 수와 연산" -> name "초5-1 기본", detail "01. 수와 연산"
_DETAIL_PATTERN = re.compile(r'\s(\d{2}\..*)')


class Textbook(models.Model):
    """교재"""

    class Category(models.TextChoices):
        ELEMENTARY = 'elementary', '초등 과정'
        MIDDLE = 'middle', '중등 과정'
        HIGH = 'high', '고등 과정'

    category = models.CharField(
        max_length=15,
        choices=Category.choices,
        default=Category.ELEMENTARY,
        verbose_name='과정'
    )
    grade = models.CharField(max_length=50, blank=True, verbose_name='학년')
    difficulty = models.CharField(max_length=50, blank=True, verbose_name='난이도')
    name = models.CharField(max_length=200, verbose_name='교재명')
    price = models.PositiveIntegerField(verbose_name='가격')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = '교재'
        verbose_name_plural = '교재 목록'
        ordering = ['category', 'grade', 'name']
        indexes = [
            models.Index(fields=['category'], name='textbook_category_idx'),
        ]

    def __str__(self):
        return f'{self.name} ({self.get_category_display()})'

    def split_name(self) -> tuple:
        """
        Split the catalog name into (book_name, book_detail).

        The detail starts at the first " NN." (space, two digits, dot);
        names without it have an empty detail.
        """
        match = _DETAIL_PATTERN.search(self.name)
        if not match:
            return self.name, ''
        return self.name[:match.start()], match.group(1)


class AccountSettings(models.Model):
    """학원 입금 계좌 (항상 pk=1 한 행만 사용)"""

    SINGLETON_ID = 1

    bank_name = models.CharField(max_length=50, blank=True, verbose_name='은행명')
    account_number = models.CharField(max_length=50, blank=True, verbose_name='계좌번호')
    account_holder = models.CharField(max_length=50, blank=True, verbose_name='예금주')

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = '입금 계좌 설정'
        verbose_name_plural = '입금 계좌 설정'

    def __str__(self):
        return f'{self.bank_name} {self.account_number} ({self.account_holder})'

    @classmethod
    def load(cls) -> 'AccountSettings':
        """Stored settings, or an unsaved empty instance when none exist."""
        return cls.objects.filter(pk=cls.SINGLETON_ID).first() or cls(pk=cls.SINGLETON_ID)
