"""Factory helpers for creating test rows.

Every helper commits, so the rows are visible to other sessions and threads.
"""

from datetime import datetime
from itertools import count
from typing import Optional

from sqlalchemy.orm import Session

from enrollment_approvals.core.security import hash_password
from enrollment_approvals.models import (
    Discipline,
    EnrollmentRequest,
    Offer,
    Participant,
    RequestState,
    User,
)

_seq = count(1)


def create_user(
    db: Session,
    *,
    email: Optional[str] = None,
    role: str = "Administrador",
    password: str = "secret-pass-123",
    status: str = "active",
) -> User:
    n = next(_seq)
    user = User(
        name=f"User {n}",
        email=(email or f"user{n}@test.local").lower(),
        hashed_password=hash_password(password),
        role=role,
        status=status,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_discipline(db: Session, name: Optional[str] = None) -> Discipline:
    discipline = Discipline(name=name or f"Disciplina {next(_seq)}")
    db.add(discipline)
    db.commit()
    db.refresh(discipline)
    return discipline


def create_offer(
    db: Session,
    *,
    capacity: int = 1,
    discipline: Optional[Discipline] = None,
    label: Optional[str] = None,
) -> Offer:
    discipline = discipline or create_discipline(db)
    offer = Offer(discipline_id=discipline.id, capacity_total=capacity, label=label)
    db.add(offer)
    db.commit()
    db.refresh(offer)
    return offer


def create_participant(
    db: Session,
    *,
    name: Optional[str] = None,
    photo_path: Optional[str] = None,
    employment_letter_path: Optional[str] = None,
    payment_proof_path: Optional[str] = None,
) -> Participant:
    n = next(_seq)
    participant = Participant(
        name=name or f"Participante {n}",
        email=f"participante{n}@test.local",
        photo_path=photo_path,
        employment_letter_path=employment_letter_path,
        payment_proof_path=payment_proof_path,
    )
    db.add(participant)
    db.commit()
    db.refresh(participant)
    return participant


def create_request(
    db: Session,
    offer: Offer,
    *,
    participant: Optional[Participant] = None,
    state: RequestState = RequestState.pending,
    rejection_reason: str = "",
    created_at: Optional[datetime] = None,
) -> EnrollmentRequest:
    participant = participant or create_participant(db)
    req = EnrollmentRequest(
        participant_id=participant.id,
        offer_id=offer.id,
        state=state,
        rejection_reason=rejection_reason,
    )
    if created_at is not None:
        req.created_at = created_at
    db.add(req)
    db.commit()
    db.refresh(req)
    return req
