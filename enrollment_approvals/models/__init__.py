from enrollment_approvals.models.user import User
from enrollment_approvals.models.discipline import Discipline
from enrollment_approvals.models.offer import Offer
from enrollment_approvals.models.participant import Participant
from enrollment_approvals.models.enrollment_request import EnrollmentRequest, RequestState
from enrollment_approvals.models.audit import AuditLog

__all__ = [
    "User",
    "Discipline",
    "Offer",
    "Participant",
    "EnrollmentRequest",
    "RequestState",
    "AuditLog",
]
