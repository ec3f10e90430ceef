from pydantic import BaseModel
from typing import Optional

class ParticipantDocuments(BaseModel):
    photo_url: Optional[str] = None
    employment_letter_url: Optional[str] = None
    payment_proof_url: Optional[str] = None
