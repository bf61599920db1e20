from .workflow import (
    ensure_transition,
    AdvisoryKind,
    DoctorStatus,
    RequestStatus,
    TimeSlot,
    UrgencyTier,
    UserRole,
    Weekday,
)

__all__ = [
    "ensure_transition",
    "AdvisoryKind",
    "DoctorStatus",
    "RequestStatus",
    "TimeSlot",
    "UrgencyTier",
    "UserRole",
    "Weekday",
]
