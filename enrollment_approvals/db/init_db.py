# enrollment_approvals/db/init_db.py
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from enrollment_approvals.core.config import settings
from enrollment_approvals.core.rbac import ROLE_ADMIN
from enrollment_approvals.core.security import hash_password
from enrollment_approvals.models.user import User

logger = logging.getLogger(__name__)

def init_db(db: Session) -> None:
    email = settings.SEED_ADMIN_EMAIL.strip().lower()
    admin = db.scalar(select(User).where(User.email == email))
    if not admin:
        admin = User(
            name="Administrador",
            email=email,
            hashed_password=hash_password(settings.SEED_ADMIN_PASSWORD),
            role=ROLE_ADMIN,
            status="active",
        )
        db.add(admin)
        logger.info("seed: administrador %s criado", email)

    db.commit()
