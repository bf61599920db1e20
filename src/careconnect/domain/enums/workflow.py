"""
Workflow status and scheduling enums shared by queries, appointments and doctors.
"""

from datetime import date
from enum import Enum
from typing import Optional

from ..errors import InvalidStatusTransitionError


class RequestStatus(str, Enum):
    """Review status for health queries and appointments."""

    PENDING = "Pending"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self in (RequestStatus.APPROVED, RequestStatus.REJECTED)

    def can_transition_to(self, target: "RequestStatus") -> bool:
        """Whether an administrator may move a request from this status to ``target``."""
        if target == self:
            return True
        return target in _ALLOWED_TRANSITIONS[self]

    @classmethod
    def from_stored(cls, value: Optional[str]) -> "RequestStatus":
        """Normalise a stored status label, including labels written by older releases."""
        if not value:
            return cls.PENDING
        for status in cls:
            if status.value.lower() == value.strip().lower():
                return status
        return _LEGACY_STATUS_LABELS.get(value.strip().lower(), cls.PENDING)


_ALLOWED_TRANSITIONS = {
    RequestStatus.PENDING: {
        RequestStatus.UNDER_REVIEW,
        RequestStatus.APPROVED,
        RequestStatus.REJECTED,
    },
    RequestStatus.UNDER_REVIEW: {RequestStatus.APPROVED, RequestStatus.REJECTED},
    RequestStatus.APPROVED: set(),
    RequestStatus.REJECTED: set(),
}

_LEGACY_STATUS_LABELS = {
    "resolved": RequestStatus.APPROVED,
    "confirmed": RequestStatus.APPROVED,
    "completed": RequestStatus.APPROVED,
    "cancelled": RequestStatus.REJECTED,
}


class DoctorStatus(str, Enum):
    """Duty status of a doctor."""

    ACTIVE = "Active"
    ON_LEAVE = "On Leave"


class Weekday(str, Enum):
    """Day names, Sunday first."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        """Weekday of a calendar date, taken as given (no timezone shifting)."""
        # date.weekday() counts from Monday == 0
        return _MONDAY_FIRST[value.weekday()]


_MONDAY_FIRST = [
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
]


class TimeSlot(str, Enum):
    """Consultation time slots."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"


class UrgencyTier(str, Enum):
    """Urgency assigned by the symptom classifier."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    NORMAL = "Normal"


class AdvisoryKind(str, Enum):
    """Presentation hint for advisory text."""

    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class UserRole(str, Enum):
    """Account roles."""

    ADMIN = "Admin"
    DOCTOR = "Doctor"
    PATIENT = "Patient"


def ensure_transition(current: RequestStatus, target: RequestStatus) -> bool:
    """Validate a review status change.

    Returns False when ``target`` equals ``current`` (nothing to do) and True
    for an allowed change. Anything else raises InvalidStatusTransitionError.
    """
    if current == target:
        return False
    if not current.can_transition_to(target):
        raise InvalidStatusTransitionError(current.value, target.value)
    return True
