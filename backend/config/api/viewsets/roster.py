"""
Roster ViewSet - autocomplete sources for the request form.

- GET /roster/students
- GET /roster/teachers
"""
from .base import BaseViewSet
from services.queries import GetStudentsQuery, GetTeachersQuery


class RosterViewSet(BaseViewSet):
    """학생/선생님 명단"""

    def students(self, request):
        result = self.get_query(GetStudentsQuery).execute()
        return self.success({'students': result.items})

    def teachers(self, request):
        result = self.get_query(GetTeachersQuery).execute()
        return self.success({'teachers': result.items})
