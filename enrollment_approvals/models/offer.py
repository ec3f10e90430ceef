from typing import Optional
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, DateTime, func
from enrollment_approvals.db.base_class import Base

class Offer(Base):
    __tablename__ = "offers"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    discipline_id: Mapped[int] = mapped_column(ForeignKey("disciplines.id"), index=True)
    label: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    # cupos fixos; os disponíveis são sempre recalculados (ver services/approval.py)
    capacity_total: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    discipline = relationship("Discipline", back_populates="offers")
    requests = relationship("EnrollmentRequest", back_populates="offer")

    __table_args__ = (CheckConstraint("capacity_total >= 0", name="capacity_non_negative"),)
