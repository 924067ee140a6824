"""
Roster queries - autocomplete lists for the request form.

GET /roster/students and GET /roster/teachers
"""
from typing import List, Dict, Any
from dataclasses import dataclass, field

from .base import BaseQuery


@dataclass
class GetRosterResult:
    items: List[Dict[str, Any]] = field(default_factory=list)


class GetStudentsQuery(BaseQuery[GetRosterResult]):
    """재원생 목록 (퇴원생 제외, 이름순)"""

    def execute(self) -> GetRosterResult:
        from apps.roster.models import Student

        students = (
            Student.objects
            .exclude(status=Student.Status.WITHDRAWN)
            .order_by('name')
        )
        return GetRosterResult(items=[
            {
                'id': s.id,
                'name': s.name,
                'grade': s.grade,
                'school': s.school,
            }
            for s in students
        ])


class GetTeachersQuery(BaseQuery[GetRosterResult]):
    """선생님 목록 (직원 제외, 이름순)"""

    def execute(self) -> GetRosterResult:
        from apps.roster.models import Teacher

        teachers = Teacher.objects.filter(role=Teacher.Role.TEACHER).order_by('name')
        return GetRosterResult(items=[
            {
                'id': t.id,
                'name': t.name,
                'subjects': t.subjects or [],
            }
            for t in teachers
        ])
