# enrollment_approvals/db/base.py
from enrollment_approvals.db.base_class import Base

# Carrega módulos para registrar tabelas no metadata:
import enrollment_approvals.models.user                # noqa: F401
import enrollment_approvals.models.discipline          # noqa: F401
import enrollment_approvals.models.offer               # noqa: F401
import enrollment_approvals.models.participant         # noqa: F401
import enrollment_approvals.models.enrollment_request  # noqa: F401
import enrollment_approvals.models.audit               # noqa: F401

__all__ = ["Base"]
