# enrollment_approvals/core/rbac.py
from fastapi import Depends, HTTPException, status

from enrollment_approvals.api.deps import get_current_user
from enrollment_approvals.core.config import settings
from enrollment_approvals.models.user import User

ROLE_ADMIN = settings.ADMIN_ROLE     # "Administrador"

def require_roles(*roles: str):
    """
    Use: Depends(require_roles(ROLE_ADMIN))
    Devolve o usuário autenticado para ser repassado ao serviço como ator.
    """
    allowed = set(roles)
    def dep(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Acceso denegado.")
        return user
    return dep

require_admin = require_roles(ROLE_ADMIN)
