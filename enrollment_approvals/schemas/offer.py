from pydantic import BaseModel
from typing import Optional

class Offer(BaseModel):
    id: int
    discipline_id: int
    discipline_name: Optional[str] = None
    label: Optional[str] = None
    capacity_total: int
    approved_count: int
    available_slots: int
