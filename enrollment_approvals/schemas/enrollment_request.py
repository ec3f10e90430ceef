from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from enrollment_approvals.models.enrollment_request import RequestState

# ---------------------------
# Listagem
# ---------------------------

class ParticipantSummary(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}

class OfferSummary(BaseModel):
    id: int
    label: Optional[str] = None
    capacity_total: int
    discipline_id: int
    discipline_name: Optional[str] = None

class EnrollmentRequestOut(BaseModel):
    id: int
    state: RequestState
    rejection_reason: str = ""
    created_at: Optional[datetime] = None
    decided_at: Optional[datetime] = None
    participant: ParticipantSummary
    offer: OfferSummary

# ---------------------------
# Decisões (aprovar / rejeitar)
# ---------------------------

class RejectIn(BaseModel):
    reason: Optional[str] = Field(default=None, max_length=2000)

class DecisionStatus(str, Enum):
    success="success"
    no_capacity="no_capacity"
    not_found="not_found"
    conflict="conflict"
    error="error"

class DecisionResult(BaseModel):
    status: DecisionStatus
    message: str
    remaining_slots: Optional[int] = None
    reason: Optional[str] = None
    retriable: bool = False
