"""Employee service layer — async CRUD against the employees table."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.common.exceptions import NotFoundException
from hrms.employees.models import Employee
from hrms.employees.schemas import EmployeeWrite

logger = logging.getLogger(__name__)

# Columns overwritten by create and update
_WRITABLE_FIELDS = ("name", "department", "role", "email", "phone", "joining_date")


class EmployeeService:
    """Async CRUD operations for employees."""

    @staticmethod
    async def get_employee(db: AsyncSession, employee_id: int) -> Employee:
        """Return the employee or raise 404."""
        employee = await db.get(Employee, employee_id)
        if employee is None:
            raise NotFoundException("Employee", employee_id)
        return employee

    @staticmethod
    async def create_employee(db: AsyncSession, data: EmployeeWrite) -> Employee:
        employee = Employee(**data.model_dump(include=set(_WRITABLE_FIELDS)))
        db.add(employee)
        await db.flush()
        logger.info("Created employee id=%s", employee.id)
        return employee

    @staticmethod
    async def list_employees(db: AsyncSession) -> Sequence[Employee]:
        result = await db.execute(select(Employee).order_by(Employee.id))
        return result.scalars().all()

    @staticmethod
    async def update_employee(
        db: AsyncSession,
        employee_id: int,
        data: EmployeeWrite,
    ) -> Employee:
        """Overwrite every writable column; omitted optional fields become null."""
        employee = await EmployeeService.get_employee(db, employee_id)
        for field in _WRITABLE_FIELDS:
            setattr(employee, field, getattr(data, field))
        await db.flush()
        logger.info("Updated employee id=%s", employee_id)
        return employee

    @staticmethod
    async def delete_employee(db: AsyncSession, employee_id: int) -> None:
        employee = await EmployeeService.get_employee(db, employee_id)
        await db.delete(employee)
        await db.flush()
        logger.info("Deleted employee id=%s", employee_id)
