from enum import Enum
from typing import Optional
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, Text, DateTime, func
from enrollment_approvals.db.base_class import Base

class RequestState(str, Enum):
    pending="pending"
    approved="approved"
    rejected="rejected"

TERMINAL_STATES = frozenset({RequestState.approved, RequestState.rejected})

class EnrollmentRequest(Base):
    """Pedido de inscrição de um participante numa oferta ("participante-oferta")."""
    __tablename__ = "enrollment_requests"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    participant_id: Mapped[int] = mapped_column(ForeignKey("participants.id"), index=True)
    offer_id: Mapped[int] = mapped_column(ForeignKey("offers.id"), index=True)
    state: Mapped[RequestState] = mapped_column(default=RequestState.pending, index=True)
    rejection_reason: Mapped[str] = mapped_column(Text(), default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    decided_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    decided_by_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), nullable=True)

    participant = relationship("Participant", back_populates="requests")
    offer = relationship("Offer", back_populates="requests")
