# enrollment_approvals/api/v1/offers.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from enrollment_approvals.api.deps import get_db
from enrollment_approvals.core.rbac import require_admin
from enrollment_approvals.crud.offer import offer_crud, available_slots
from enrollment_approvals.models.offer import Offer as OfferModel
from enrollment_approvals.schemas.offer import Offer

router = APIRouter()

def _to_schema(db: Session, o: OfferModel) -> Offer:
    # leitura sem lock: pode estar defasada, serve só para exibição
    slots = available_slots(db, o)
    return Offer(
        id=o.id,
        discipline_id=o.discipline_id,
        discipline_name=o.discipline.name if o.discipline else None,
        label=o.label,
        capacity_total=o.capacity_total,
        approved_count=o.capacity_total - slots,
        available_slots=slots,
    )

@router.get("/", response_model=List[Offer])
def list_offers(db: Session = Depends(get_db), _ = Depends(require_admin)):
    return [_to_schema(db, o) for o in offer_crud.list_all(db)]

@router.get("/{offer_id}", response_model=Offer)
def get_offer(offer_id: int = Path(..., ge=1), db: Session = Depends(get_db), _ = Depends(require_admin)):
    o = offer_crud.get_detailed(db, offer_id)
    if not o:
        raise HTTPException(status_code=404, detail="Oferta no encontrada.")
    return _to_schema(db, o)
