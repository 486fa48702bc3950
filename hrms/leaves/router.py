"""Leave router — apply, list, approve/reject."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.database import get_db
from hrms.leaves.schemas import (
    LeaveCreate,
    LeaveResponse,
    LeaveStatusUpdate,
    LeaveWithEmployee,
)
from hrms.leaves.service import LeaveService

router = APIRouter(prefix="")


# ── POST /leaves ────────────────────────────────────────────────────

@router.post("", response_model=LeaveResponse)
async def apply_leave(
    body: LeaveCreate,
    db: AsyncSession = Depends(get_db),
):
    return await LeaveService.create_leave(db, body)


# ── GET /leaves ─────────────────────────────────────────────────────

@router.get("", response_model=list[LeaveWithEmployee])
async def list_leaves(db: AsyncSession = Depends(get_db)):
    """All leave requests, each with its employee embedded."""
    return await LeaveService.list_leaves(db)


# ── PUT /leaves/{id} ────────────────────────────────────────────────

@router.put("/{leave_id}", response_model=LeaveResponse)
async def update_leave_status(
    leave_id: int,
    body: LeaveStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await LeaveService.update_status(db, leave_id, body.status)
