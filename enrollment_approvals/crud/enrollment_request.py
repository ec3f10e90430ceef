from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import select
from enrollment_approvals.crud.base import CRUDBase
from enrollment_approvals.models.enrollment_request import EnrollmentRequest, RequestState
from enrollment_approvals.models.offer import Offer
from enrollment_approvals.models.discipline import Discipline

class CRUDEnrollmentRequest(CRUDBase[EnrollmentRequest]):
    def _with_relations(self):
        return select(EnrollmentRequest).options(
            joinedload(EnrollmentRequest.participant),
            joinedload(EnrollmentRequest.offer).joinedload(Offer.discipline),
        )

    def get_detailed(self, db: Session, id: int) -> Optional[EnrollmentRequest]:
        stmt = self._with_relations().where(EnrollmentRequest.id == id)
        return db.execute(stmt).scalars().first()

    def list_filtered(
        self,
        db: Session,
        *,
        state: Optional[RequestState] = None,
        discipline: Optional[str] = None,
    ) -> List[EnrollmentRequest]:
        """Mais recentes primeiro; filtros opcionais por estado e nome da disciplina."""
        stmt = self._with_relations()
        if state is not None:
            stmt = stmt.where(EnrollmentRequest.state == state)
        if discipline:
            stmt = stmt.where(
                EnrollmentRequest.offer.has(Offer.discipline.has(Discipline.name == discipline))
            )
        stmt = stmt.order_by(EnrollmentRequest.created_at.desc(), EnrollmentRequest.id.desc())
        return list(db.execute(stmt).scalars().unique().all())

enrollment_request_crud = CRUDEnrollmentRequest(EnrollmentRequest)
