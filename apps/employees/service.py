from typing import List, Optional
from loguru import logger
from framework.exceptions.handler import BusinessException, StorageError
from framework.repository.unit_of_work import UnitOfWork
from .models import Employee
from .repository import EmployeeStore

class EmployeeService:
    def __init__(self, uow: UnitOfWork):
        """Initialize Employee Service with UnitOfWork; each write commits on its own."""
        self.uow = uow

    @property
    def store(self) -> EmployeeStore:
        return self.uow.get_repository(EmployeeStore, Employee)

    async def register_employee(self, first_name: str, last_name: str) -> Employee:
        """Persist a new employee."""
        try:
            employee = await self.store.save(Employee(first_name=first_name, last_name=last_name))
            await self.uow.commit()
        except StorageError as e:
            await self.uow.rollback()
            logger.error(f"Failed to register employee {first_name} {last_name}: {str(e)}")
            raise

        logger.info(f"Employee {employee.id} registered: {first_name} {last_name}")
        return employee

    async def get_employee(self, employee_id: int) -> Optional[Employee]:
        return await self.store.find_by_id(employee_id)

    async def list_employees(self) -> List[Employee]:
        return list(await self.store.find_all())

    async def update_employee(
        self,
        employee_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None
    ) -> Employee:
        """Change the given names of an existing employee; other fields are kept."""
        employee = await self.store.find_by_id(employee_id)
        if employee is None:
            raise BusinessException(f"Employee not found: id={employee_id}", code=404)

        if first_name is not None:
            employee.first_name = first_name
        if last_name is not None:
            employee.last_name = last_name

        try:
            employee = await self.store.save(employee)
            await self.uow.commit()
        except StorageError as e:
            await self.uow.rollback()
            logger.error(f"Failed to update employee {employee_id}: {str(e)}")
            raise

        logger.info(f"Employee {employee_id} updated")
        return employee

    async def remove_employee(self, employee_id: int) -> None:
        """Delete an employee; unknown ids are a no-op."""
        try:
            await self.store.delete_by_id(employee_id)
            await self.uow.commit()
        except StorageError as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete employee {employee_id}: {str(e)}")
            raise

        logger.info(f"Employee {employee_id} removed")

    async def search_by_last_name(self, text: str) -> List[Employee]:
        employees = await self.store.find_employees_by_last_name_containing(text)
        logger.debug(f"Last name search '{text}' matched {len(employees)} employee(s)")
        return employees
