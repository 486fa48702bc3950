"""Employee Pydantic v2 schemas — request / response validation."""

from datetime import date
from typing import Optional

from hrms.common.schemas import CamelModel, EmailAddress


class EmployeeWrite(CamelModel):
    """Body of both POST /employees and PUT /employees/{id}.

    PUT is a full replace: optional fields left out are stored as null.
    """

    name: str
    department: Optional[str] = None
    role: Optional[str] = None
    email: EmailAddress
    phone: Optional[str] = None
    joining_date: date


class EmployeeResponse(CamelModel):
    id: int
    name: str
    department: Optional[str] = None
    role: Optional[str] = None
    email: str
    phone: Optional[str] = None
    joining_date: date


class MessageResponse(CamelModel):
    message: str
