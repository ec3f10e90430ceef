from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import select, func
from enrollment_approvals.crud.base import CRUDBase
from enrollment_approvals.models.offer import Offer
from enrollment_approvals.models.enrollment_request import EnrollmentRequest, RequestState

def count_approved(db: Session, offer_id: int) -> int:
    return db.scalar(
        select(func.count()).select_from(EnrollmentRequest).where(
            EnrollmentRequest.offer_id == offer_id,
            EnrollmentRequest.state == RequestState.approved,
        )
    ) or 0

def available_slots(db: Session, offer: Offer) -> int:
    """capacity_total - aprovados. Sem bloqueio: serve só para exibição."""
    return offer.capacity_total - count_approved(db, offer.id)

class CRUDOffer(CRUDBase[Offer]):
    def get_detailed(self, db: Session, id: int) -> Optional[Offer]:
        stmt = select(Offer).options(joinedload(Offer.discipline)).where(Offer.id == id)
        return db.execute(stmt).scalars().first()

    def list_all(self, db: Session) -> List[Offer]:
        stmt = select(Offer).options(joinedload(Offer.discipline)).order_by(Offer.id)
        return list(db.execute(stmt).scalars().all())

offer_crud = CRUDOffer(Offer)
