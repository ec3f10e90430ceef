# enrollment_approvals/services/approval.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from prometheus_client import Counter
from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from enrollment_approvals.core.config import settings
from enrollment_approvals.core.locks import LockTimeoutError, OfferLockRegistry, offer_locks
from enrollment_approvals.crud.enrollment_request import enrollment_request_crud
from enrollment_approvals.crud.offer import available_slots, offer_crud
from enrollment_approvals.models.audit import AuditLog
from enrollment_approvals.models.enrollment_request import (
    TERMINAL_STATES,
    EnrollmentRequest,
    RequestState,
)
from enrollment_approvals.models.offer import Offer
from enrollment_approvals.models.user import User
from enrollment_approvals.schemas.enrollment_request import DecisionResult, DecisionStatus

logger = logging.getLogger(__name__)

DECISIONS = Counter(
    "enrollment_decisions_total",
    "Decisões sobre pedidos de inscrição",
    ["operation", "status"],
)

MSG_APPROVED = "✅ Inscripción aprobada correctamente. Cupos restantes: {remaining}"
MSG_NO_CAPACITY = "⚠️ No hay cupos disponibles en esta disciplina. El participante deberá seleccionar otra."
MSG_REJECTED = "❌ La inscripción fue rechazada. Motivo: {reason}"
MSG_NOT_FOUND = "Solicitud no encontrada."
MSG_ALREADY_DECIDED = "La solicitud ya fue {state} y no admite una nueva decisión."
MSG_APPROVE_ERROR = "Error al aprobar: {detail}"
MSG_REJECT_ERROR = "Error al rechazar: {detail}"

_STATE_LABEL = {
    RequestState.approved: "aprobada",
    RequestState.rejected: "rechazada",
    RequestState.pending: "pendiente",
}

AUDIT_ENTITY = "enrollment_request"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class EnrollmentApprovalService:
    # O serviço é dono da transação da sessão: cada decisão termina em commit
    # ou rollback, levando junto o que o chamador tiver deixado pendente.

    def __init__(
        self,
        db: Session,
        *,
        locks: Optional[OfferLockRegistry] = None,
        lock_timeout: Optional[float] = None,
    ):
        self.db = db
        self.locks = locks if locks is not None else offer_locks
        self.lock_timeout = settings.APPROVAL_LOCK_TIMEOUT_SECONDS if lock_timeout is None else lock_timeout

    # ------------------------------------------------------------------
    # Approve
    # ------------------------------------------------------------------

    def approve(self, request_id: int, *, actor: Optional[User] = None) -> DecisionResult:
        """Aprova se a oferta ainda tem cupo; sem cupo o pedido é apagado."""
        try:
            offer_id = self.db.scalar(
                select(EnrollmentRequest.offer_id).where(EnrollmentRequest.id == request_id)
            )
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("approve %s: falha ao localizar o pedido", request_id)
            return self._result("approve", DecisionStatus.error,
                                MSG_APPROVE_ERROR.format(detail=exc), retriable=True)

        if offer_id is None:
            return self._result("approve", DecisionStatus.not_found, MSG_NOT_FOUND)

        try:
            with self.locks.hold(offer_id, timeout=self.lock_timeout):
                return self._approve_locked(request_id, offer_id, actor)
        except LockTimeoutError as exc:
            logger.warning("approve %s: %s", request_id, exc)
            return self._result("approve", DecisionStatus.error,
                                MSG_APPROVE_ERROR.format(detail=exc), retriable=True)

    def _approve_locked(self, request_id: int, offer_id: int, actor: Optional[User]) -> DecisionResult:
        try:
            self._apply_db_lock_timeout()
            offer = self.db.execute(
                select(Offer).where(Offer.id == offer_id).with_for_update()
            ).scalar_one_or_none()
            req = self.db.execute(
                select(EnrollmentRequest)
                .where(EnrollmentRequest.id == request_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            ).scalar_one_or_none()

            if req is None or offer is None:
                self.db.rollback()
                return self._result("approve", DecisionStatus.not_found, MSG_NOT_FOUND)

            if req.offer_id != offer_id:
                # pedido mudou de oferta entre a leitura e o lock
                self.db.rollback()
                return self._result("approve", DecisionStatus.error,
                                    MSG_APPROVE_ERROR.format(detail="la oferta del pedido cambió"),
                                    retriable=True)

            if req.state in TERMINAL_STATES:
                return self._approve_conflict(request_id, req.state)

            # recontagem dentro da transação, depois do lock
            slots = available_slots(self.db, offer)
            participant_id = req.participant_id
            # rejeição não pega o lock da oferta: toda escrita exige que o pedido siga pendente
            still_pending = (
                EnrollmentRequest.id == request_id,
                EnrollmentRequest.state == RequestState.pending,
            )

            if slots <= 0:
                res = self.db.execute(
                    delete(EnrollmentRequest)
                    .where(*still_pending)
                    .execution_options(synchronize_session=False)
                )
                if res.rowcount != 1:
                    return self._approve_conflict(request_id, self._current_state(request_id))
                self.db.expunge(req)
                self._audit(actor, request_id, "delete_no_capacity", {
                    "offer_id": offer_id,
                    "participant_id": participant_id,
                    "capacity_total": offer.capacity_total,
                })
                self.db.commit()
                logger.info("approve %s: oferta %s sem cupos, pedido removido", request_id, offer_id)
                return self._result("approve", DecisionStatus.no_capacity, MSG_NO_CAPACITY,
                                    remaining_slots=0)

            res = self.db.execute(
                update(EnrollmentRequest)
                .where(*still_pending)
                .values(
                    state=RequestState.approved,
                    rejection_reason="",
                    decided_at=_now(),
                    decided_by_id=actor.id if actor is not None else None,
                )
                .execution_options(synchronize_session=False)
            )
            if res.rowcount != 1:
                return self._approve_conflict(request_id, self._current_state(request_id))
            self._audit(actor, request_id, "approve", {
                "offer_id": offer_id,
                "from": RequestState.pending.value,
                "to": RequestState.approved.value,
                "available_before": slots,
            })
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("approve %s: transação desfeita", request_id)
            return self._result("approve", DecisionStatus.error,
                                MSG_APPROVE_ERROR.format(detail=exc), retriable=True)

        remaining = slots - 1
        logger.info("approve %s: aprovado na oferta %s, restam %s", request_id, offer_id, remaining)
        return self._result("approve", DecisionStatus.success,
                            MSG_APPROVED.format(remaining=remaining), remaining_slots=remaining)

    def _approve_conflict(self, request_id: int, state: Optional[RequestState]) -> DecisionResult:
        self.db.rollback()
        if state is None:
            return self._result("approve", DecisionStatus.not_found, MSG_NOT_FOUND)
        logger.warning("approve %s: pedido já %s", request_id, state.value)
        return self._result("approve", DecisionStatus.conflict,
                            MSG_ALREADY_DECIDED.format(state=_STATE_LABEL[state]))

    # ------------------------------------------------------------------
    # Reject
    # ------------------------------------------------------------------

    def reject(
        self,
        request_id: int,
        reason: Optional[str] = None,
        *,
        actor: Optional[User] = None,
    ) -> DecisionResult:
        motive = (reason or "").strip() or settings.DEFAULT_REJECTION_REASON
        try:
            req = enrollment_request_crud.get(self.db, request_id)
            if req is None:
                return self._result("reject", DecisionStatus.not_found, MSG_NOT_FOUND)

            # escrita condicional: nunca sobrescreve uma aprovação (nem concorrente)
            res = self.db.execute(
                update(EnrollmentRequest)
                .where(
                    EnrollmentRequest.id == request_id,
                    EnrollmentRequest.state != RequestState.approved,
                )
                .values(
                    state=RequestState.rejected,
                    rejection_reason=motive,
                    decided_at=_now(),
                    decided_by_id=actor.id if actor is not None else None,
                )
                .execution_options(synchronize_session=False)
            )
            if res.rowcount == 0:
                # aprovado ou apagado por falta de cupo desde a leitura
                gone = self._current_state(request_id) is None
                self.db.rollback()
                if gone:
                    return self._result("reject", DecisionStatus.not_found, MSG_NOT_FOUND)
                logger.warning("reject %s: pedido já aprovado", request_id)
                return self._result("reject", DecisionStatus.conflict,
                                    MSG_ALREADY_DECIDED.format(state=_STATE_LABEL[RequestState.approved]))

            self._audit(actor, request_id, "reject", {"to": RequestState.rejected.value, "reason": motive})
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("reject %s: transação desfeita", request_id)
            return self._result("reject", DecisionStatus.error,
                                MSG_REJECT_ERROR.format(detail=exc), retriable=True)

        logger.info("reject %s: rejeitado (%s)", request_id, motive)
        return self._result("reject", DecisionStatus.success,
                            MSG_REJECTED.format(reason=motive), reason=motive)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def available_slots(self, offer_id: int) -> Optional[int]:
        """Leitura sem lock, só para exibição."""
        offer = offer_crud.get(self.db, offer_id)
        if offer is None:
            return None
        return available_slots(self.db, offer)

    def _current_state(self, request_id: int) -> Optional[RequestState]:
        return self.db.scalar(
            select(EnrollmentRequest.state).where(EnrollmentRequest.id == request_id)
        )

    def _apply_db_lock_timeout(self) -> None:
        bind = self.db.get_bind()
        if bind.dialect.name == "postgresql":
            ms = int(self.lock_timeout * 1000)
            # SET não aceita bind param; valor é sempre int
            self.db.execute(text(f"SET LOCAL lock_timeout = {ms}"))

    def _audit(self, actor: Optional[User], request_id: int, action: str, diff: Dict[str, Any]) -> None:
        self.db.add(AuditLog(
            user_id=actor.id if actor is not None else None,
            entity=AUDIT_ENTITY,
            entity_id=request_id,
            action=action,
            diff_json=diff,
        ))

    @staticmethod
    def _result(operation: str, status: DecisionStatus, message: str, **extra: Any) -> DecisionResult:
        DECISIONS.labels(operation=operation, status=status.value).inc()
        return DecisionResult(status=status, message=message, **extra)
