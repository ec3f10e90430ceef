# enrollment_approvals/api/v1/requests.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from enrollment_approvals.api.deps import get_db
from enrollment_approvals.core.rbac import require_admin
from enrollment_approvals.crud.enrollment_request import enrollment_request_crud
from enrollment_approvals.models.enrollment_request import EnrollmentRequest, RequestState
from enrollment_approvals.models.user import User
from enrollment_approvals.schemas.enrollment_request import (
    DecisionResult,
    DecisionStatus,
    EnrollmentRequestOut,
    OfferSummary,
    ParticipantSummary,
    RejectIn,
)
from enrollment_approvals.services.approval import EnrollmentApprovalService

router = APIRouter()

_HTTP_STATUS = {
    DecisionStatus.success: 200,
    DecisionStatus.no_capacity: 200,
    DecisionStatus.not_found: 404,
    DecisionStatus.conflict: 409,
    DecisionStatus.error: 500,
}

def _to_out(r: EnrollmentRequest) -> EnrollmentRequestOut:
    offer = r.offer
    return EnrollmentRequestOut(
        id=r.id,
        state=r.state,
        rejection_reason=r.rejection_reason or "",
        created_at=r.created_at,
        decided_at=r.decided_at,
        participant=ParticipantSummary.model_validate(r.participant),
        offer=OfferSummary(
            id=offer.id,
            label=offer.label,
            capacity_total=offer.capacity_total,
            discipline_id=offer.discipline_id,
            discipline_name=offer.discipline.name if offer.discipline else None,
        ),
    )

def _respond(result: DecisionResult) -> JSONResponse:
    return JSONResponse(
        status_code=_HTTP_STATUS[result.status],
        content=result.model_dump(mode="json", exclude_none=True),
    )

@router.get("/", response_model=List[EnrollmentRequestOut])
def list_requests(
    state: Optional[RequestState] = Query(None, description="pending | approved | rejected"),
    discipline: Optional[str] = Query(None, description="Nome exato da disciplina"),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    rows = enrollment_request_crud.list_filtered(db, state=state, discipline=discipline)
    return [_to_out(r) for r in rows]

@router.get("/{request_id}", response_model=EnrollmentRequestOut)
def get_request(
    request_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    r = enrollment_request_crud.get_detailed(db, request_id)
    if not r:
        raise HTTPException(status_code=404, detail="Solicitud no encontrada.")
    return _to_out(r)

@router.post("/{request_id}/approve", response_model=DecisionResult,
             responses={404: {"model": DecisionResult}, 409: {"model": DecisionResult}, 500: {"model": DecisionResult}})
def approve_request(
    request_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return _respond(EnrollmentApprovalService(db).approve(request_id, actor=admin))

@router.post("/{request_id}/reject", response_model=DecisionResult,
             responses={404: {"model": DecisionResult}, 409: {"model": DecisionResult}, 500: {"model": DecisionResult}})
def reject_request(
    request_id: int = Path(..., ge=1),
    body: Optional[RejectIn] = Body(None),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    reason = body.reason if body else None
    return _respond(EnrollmentApprovalService(db).reject(request_id, reason, actor=admin))
