"""Leave Pydantic v2 schemas — request / response validation."""

from datetime import date
from typing import Optional

from hrms.common.constants import LeaveStatus
from hrms.common.schemas import CamelModel
from hrms.employees.schemas import EmployeeResponse


# ── Requests ────────────────────────────────────────────────────────

class LeaveCreate(CamelModel):
    """New leave request. Any ``status`` in the body is ignored."""

    employee_id: int
    start_date: date
    end_date: date
    leave_type: str
    reason: Optional[str] = None


class LeaveStatusUpdate(CamelModel):
    status: LeaveStatus


# ── Responses ───────────────────────────────────────────────────────

class LeaveResponse(CamelModel):
    id: int
    employee_id: int
    start_date: date
    end_date: date
    leave_type: str
    reason: Optional[str] = None
    status: LeaveStatus


class LeaveWithEmployee(LeaveResponse):
    employee: EmployeeResponse
