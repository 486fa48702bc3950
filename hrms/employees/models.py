"""Employee ORM model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.database import Base

if TYPE_CHECKING:
    from hrms.leaves.models import Leave


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.String(200), nullable=False)
    department: Mapped[Optional[str]] = mapped_column(sa.String(200))
    role: Mapped[Optional[str]] = mapped_column(sa.String(200))
    email: Mapped[str] = mapped_column(sa.String(320), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(sa.String(50))
    joining_date: Mapped[date] = mapped_column(sa.Date, nullable=False)

    # Relationships
    leaves: Mapped[list[Leave]] = relationship(
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
