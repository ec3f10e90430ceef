# enrollment_approvals/schemas/user.py
from typing import Optional
from pydantic import BaseModel

class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    status: Optional[str] = None

    model_config = {"from_attributes": True}
