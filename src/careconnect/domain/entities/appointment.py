"""Appointment entity: a scheduled booking request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..enums.workflow import RequestStatus, TimeSlot, Weekday, ensure_transition
from ..errors import InvalidRequestDataError


@dataclass
class Appointment:
    """Appointment domain entity."""

    appointment_id: str
    user_id: Optional[str]
    patient_name: str
    requested_date: date
    department: str = "General Physician"
    time_slot: TimeSlot = TimeSlot.MORNING
    status: RequestStatus = RequestStatus.PENDING
    assigned_doctor_id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if isinstance(self.requested_date, datetime):
            self.requested_date = self.requested_date.date()
        if not isinstance(self.requested_date, date):
            raise InvalidRequestDataError(
                "requested_date", "Preferred Date is required", self.requested_date
            )
        try:
            self.time_slot = TimeSlot(self.time_slot)
        except ValueError:
            raise InvalidRequestDataError(
                "time_slot", f"Unknown time slot '{self.time_slot}'", self.time_slot
            ) from None
        self.status = RequestStatus(self.status)
        if not self.department or not self.department.strip():
            self.department = "General Physician"
        if not self.patient_name or not self.patient_name.strip():
            raise InvalidRequestDataError("patient_name", "Patient name is required")

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_date(self.requested_date)

    def change_status(self, target: RequestStatus) -> bool:
        """Move through the review workflow. Returns False when nothing changed."""
        target = RequestStatus(target)
        if not ensure_transition(self.status, target):
            return False
        self.status = target
        return True

    def assign_doctor(self, doctor_id: Optional[str]) -> None:
        self.assigned_doctor_id = doctor_id or None
