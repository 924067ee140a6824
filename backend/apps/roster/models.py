"""
Roster Domain Models

요청서 작성 화면의 자동완성용 명단입니다:
- Student (학생, 퇴원생은 자동완성에서 제외)
- Teacher (선생님/직원)
"""
from django.db import models


class Student(models.Model):
    """학생"""

    class Status(models.TextChoices):
        ACTIVE = 'active', '재원'
        WITHDRAWN = 'withdrawn', '퇴원'

    name = models.CharField(max_length=100, verbose_name='이름')
    grade = models.CharField(max_length=50, blank=True, verbose_name='학년')
    school = models.CharField(max_length=100, blank=True, verbose_name='학교')
    status = models.CharField(
        max_length=15,
        choices=Status.choices,
        default=Status.ACTIVE,
        verbose_name='상태'
    )

    class Meta:
        verbose_name = '학생'
        verbose_name_plural = '학생 명단'
        indexes = [
            models.Index(fields=['status'], name='student_status_idx'),
        ]

    def __str__(self):
        return f'{self.name} ({self.school} {self.grade})'


class Teacher(models.Model):
    """선생님"""

    class Role(models.TextChoices):
        TEACHER = 'teacher', '선생님'
        STAFF = 'staff', '직원'

    name = models.CharField(max_length=100, verbose_name='이름')
    subjects = models.JSONField(default=list, blank=True, verbose_name='담당 과목')
    role = models.CharField(
        max_length=15,
        choices=Role.choices,
        default=Role.TEACHER,
        verbose_name='역할'
    )

    class Meta:
        verbose_name = '선생님'
        verbose_name_plural = '선생님 명단'

    def __str__(self):
        return self.name
