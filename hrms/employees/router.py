"""Employee router — create, list, update, delete.

Routes:
    /employees       — List, create employees
    /employees/{id}  — Replace, delete an employee
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.common.constants import EMPLOYEE_DELETED_MESSAGE
from hrms.database import get_db
from hrms.employees.schemas import EmployeeResponse, EmployeeWrite, MessageResponse
from hrms.employees.service import EmployeeService

router = APIRouter(prefix="")


# ── POST /employees — Create employee ──────────────────────────────

@router.post("", response_model=EmployeeResponse)
async def create_employee(
    body: EmployeeWrite,
    db: AsyncSession = Depends(get_db),
):
    return await EmployeeService.create_employee(db, body)


# ── GET /employees — List employees ─────────────────────────────────

@router.get("", response_model=list[EmployeeResponse])
async def list_employees(db: AsyncSession = Depends(get_db)):
    """Every employee, unpaginated, in id order."""
    return await EmployeeService.list_employees(db)


# ── PUT /employees/{id} — Replace employee ─────────────────────────

@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    body: EmployeeWrite,
    db: AsyncSession = Depends(get_db),
):
    return await EmployeeService.update_employee(db, employee_id, body)


# ── DELETE /employees/{id} — Delete employee ───────────────────────

@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
):
    await EmployeeService.delete_employee(db, employee_id)
    return MessageResponse(message=EMPLOYEE_DELETED_MESSAGE)
