"""Leave service layer — apply, list, status changes."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hrms.common.constants import LEAVE_STATUS_TRANSITIONS, LeaveStatus
from hrms.common.exceptions import ConflictError, NotFoundException
from hrms.employees.models import Employee
from hrms.leaves.models import Leave
from hrms.leaves.schemas import LeaveCreate

logger = logging.getLogger(__name__)


class LeaveService:
    """Async operations for leave requests."""

    # ─────────────────────────────────────────────────────────────────
    # Apply
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    async def create_leave(db: AsyncSession, data: LeaveCreate) -> Leave:
        """Record a new leave request; status always starts as Pending."""
        if await db.get(Employee, data.employee_id) is None:
            raise NotFoundException("Employee", data.employee_id)

        leave = Leave(
            employee_id=data.employee_id,
            start_date=data.start_date,
            end_date=data.end_date,
            leave_type=data.leave_type,
            reason=data.reason,
            status=LeaveStatus.pending,
        )
        db.add(leave)
        await db.flush()
        logger.info("Leave id=%s applied for employee id=%s", leave.id, leave.employee_id)
        return leave

    # ─────────────────────────────────────────────────────────────────
    # List
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    async def list_leaves(db: AsyncSession) -> Sequence[Leave]:
        result = await db.execute(
            select(Leave)
            .options(selectinload(Leave.employee))
            .order_by(Leave.id)
        )
        return result.scalars().all()

    # ─────────────────────────────────────────────────────────────────
    # Status
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    async def update_status(
        db: AsyncSession,
        leave_id: int,
        status: LeaveStatus,
    ) -> Leave:
        """Move a leave to ``status``.

        Only Pending leaves can be decided; repeating the current status is
        accepted and changes nothing.
        """
        leave = await db.get(Leave, leave_id)
        if leave is None:
            raise NotFoundException("Leave", leave_id)

        if status == leave.status:
            return leave

        if status not in LEAVE_STATUS_TRANSITIONS[leave.status]:
            raise ConflictError(
                f"Cannot change leave status from {leave.status.value} to {status.value}.",
                errors={"status": [f"Leave is already {leave.status.value}."]},
            )

        old_status = leave.status
        leave.status = status
        await db.flush()
        logger.info(
            "Leave id=%s status %s -> %s", leave_id, old_status.value, status.value,
        )
        return leave
