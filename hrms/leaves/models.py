"""Leave ORM model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.common.constants import LeaveStatus
from hrms.database import Base

if TYPE_CHECKING:
    from hrms.employees.models import Employee


class Leave(Base):
    __tablename__ = "leaves"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        sa.Integer,
        sa.ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date] = mapped_column(sa.Date, nullable=False)
    end_date: Mapped[date] = mapped_column(sa.Date, nullable=False)
    leave_type: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(sa.Text)
    status: Mapped[LeaveStatus] = mapped_column(
        sa.Enum(
            LeaveStatus,
            name="leave_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
            native_enum=False,
            length=20,
        ),
        nullable=False,
        default=LeaveStatus.pending,
    )

    # Relationships
    employee: Mapped[Employee] = relationship(back_populates="leaves")
