"""Common module — shared utilities for the HRMS API."""

from hrms.common.constants import LEAVE_STATUS_TRANSITIONS, LeaveStatus
from hrms.common.exceptions import (
    AppException,
    ConflictError,
    InvalidCredentials,
    NotFoundException,
    UnauthorizedException,
    UserAlreadyExists,
    register_exception_handlers,
)
from hrms.common.schemas import CamelModel, EmailAddress

__all__ = [
    # Constants / Enums
    "LeaveStatus",
    "LEAVE_STATUS_TRANSITIONS",
    # Exceptions
    "AppException",
    "ConflictError",
    "InvalidCredentials",
    "NotFoundException",
    "UnauthorizedException",
    "UserAlreadyExists",
    "register_exception_handlers",
    # Schemas
    "CamelModel",
    "EmailAddress",
]
