"""Employee module repository implementation."""

from typing import List, Optional
from sqlmodel import select, col
from framework.config import settings
from framework.repository.base import BaseRepository
from .models import Employee


class EmployeeStore(BaseRepository[Employee]):
    """Employee repository: CRUD from BaseRepository plus last-name search."""

    def __init__(self, session, case_sensitive: Optional[bool] = None):
        super().__init__(session, Employee)
        if case_sensitive is None:
            case_sensitive = settings.EMPLOYEE_SEARCH_CASE_SENSITIVE
        self.case_sensitive = case_sensitive

    async def find_employees_by_last_name_containing(self, text: str) -> List[Employee]:
        """
        Find employees whose last name contains ``text``.

        Issues ``last_name LIKE '%text%'`` with ``%`` and ``_`` escaped, so
        they match literally. LIKE ignores case under the default MySQL and
        SQLite collations; with case_sensitive set, rows are re-checked with
        a plain substring test. An empty ``text`` matches every employee.
        """
        statement = select(Employee).where(col(Employee.last_name).contains(text, autoescape=True))
        result = await self.session.exec(statement)
        employees = list(result.all())
        if self.case_sensitive:
            employees = [employee for employee in employees if text in employee.last_name]
        return employees
