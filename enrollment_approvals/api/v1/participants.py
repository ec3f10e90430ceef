# enrollment_approvals/api/v1/participants.py
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from enrollment_approvals.api.deps import get_db
from enrollment_approvals.core.rbac import require_admin
from enrollment_approvals.models.participant import Participant
from enrollment_approvals.schemas.participant import ParticipantDocuments
from enrollment_approvals.services.storage import documents_for

router = APIRouter()

@router.get("/{participant_id}/documents", response_model=ParticipantDocuments)
def get_documents(
    participant_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    _ = Depends(require_admin),
):
    p = db.get(Participant, participant_id)
    if not p:
        raise HTTPException(status_code=404, detail="Participante no encontrado.")
    return documents_for(p)
