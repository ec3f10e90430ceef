# enrollment_approvals/services/storage.py
from __future__ import annotations

from typing import Optional

from enrollment_approvals.core.config import settings
from enrollment_approvals.models.participant import Participant
from enrollment_approvals.schemas.participant import ParticipantDocuments

def public_url(path: Optional[str], base_url: Optional[str] = None) -> Optional[str]:
    """Caminho no storage -> URL pública. URLs absolutas passam direto."""
    if not path:
        return None
    if path.startswith(("http://", "https://")):
        return path
    base = (settings.STORAGE_PUBLIC_URL if base_url is None else base_url).rstrip("/")
    return f"{base}/{path.lstrip('/')}"

def documents_for(participant: Participant, base_url: Optional[str] = None) -> ParticipantDocuments:
    return ParticipantDocuments(
        photo_url=public_url(participant.photo_path, base_url),
        employment_letter_url=public_url(participant.employment_letter_path, base_url),
        payment_proof_url=public_url(participant.payment_proof_path, base_url),
    )
