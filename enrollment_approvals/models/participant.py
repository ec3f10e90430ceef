from typing import Optional
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, DateTime, func
from enrollment_approvals.db.base_class import Base

class Participant(Base):
    __tablename__ = "participants"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(160))
    email: Mapped[str] = mapped_column(String(160), index=True)

    # caminhos relativos no storage de documentos
    photo_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    employment_letter_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    payment_proof_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    requests = relationship("EnrollmentRequest", back_populates="participant")
