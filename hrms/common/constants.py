"""Enums and constants for the HRMS API."""

from __future__ import annotations

import enum


# ── Leave ───────────────────────────────────────────────────────────

class LeaveStatus(str, enum.Enum):
    pending = "Pending"
    approved = "Approved"
    rejected = "Rejected"


# Allowed status changes; re-submitting the current status is always a no-op
LEAVE_STATUS_TRANSITIONS: dict[LeaveStatus, set[LeaveStatus]] = {
    LeaveStatus.pending: {LeaveStatus.approved, LeaveStatus.rejected},
    LeaveStatus.approved: set(),
    LeaveStatus.rejected: set(),
}


# ── Messages ────────────────────────────────────────────────────────

HEALTH_MESSAGE = "HRMS API is running"
INVALID_CREDENTIALS_MESSAGE = "Invalid Credentials"
USER_EXISTS_MESSAGE = "User already exists"
EMPLOYEE_DELETED_MESSAGE = "Employee deleted successfully"
