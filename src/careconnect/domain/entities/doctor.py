"""Doctor domain entity: one entry of the doctor registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, TypeVar

from ..enums.workflow import DoctorStatus, TimeSlot, Weekday
from ..errors import InvalidDoctorDataError

E = TypeVar("E", Weekday, TimeSlot)


def _dedupe(values: Iterable, enum_cls: type[E], field_name: str) -> List[E]:
    """Coerce to enum members, dropping repeats but keeping first-seen order."""
    result: List[E] = []
    for raw in values or []:
        try:
            member = enum_cls(raw)
        except ValueError:
            raise InvalidDoctorDataError(
                field_name, f"Unknown value '{raw}' in {field_name}", raw
            ) from None
        if member not in result:
            result.append(member)
    return result


@dataclass
class Doctor:
    """Doctor domain entity.

    ``available_days`` and ``time_slots`` are ordered: the first entry of
    each is what patients are told as the earliest availability.
    """

    doctor_id: str
    name: str
    department: str
    available_days: List[Weekday] = field(default_factory=list)
    time_slots: List[TimeSlot] = field(default_factory=list)
    status: DoctorStatus = DoctorStatus.ACTIVE
    experience: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.status = DoctorStatus(self.status)
        self.available_days = _dedupe(self.available_days, Weekday, "available_days")
        self.time_slots = _dedupe(self.time_slots, TimeSlot, "time_slots")
        self._validate_doctor_data()

    def _validate_doctor_data(self) -> None:
        if not self.doctor_id or not self.doctor_id.strip():
            raise InvalidDoctorDataError(
                "doctor_id", "doctor_id must be a non-empty string", self.doctor_id
            )

        if not self.name or not self.name.strip():
            raise InvalidDoctorDataError("name", "Name is required", self.name)

        if len(self.name.strip()) < 2:
            raise InvalidDoctorDataError(
                "name",
                f"Name must be at least 2 characters, got {len(self.name.strip())}",
                self.name,
            )

        if len(self.name) > 120:
            raise InvalidDoctorDataError(
                "name",
                f"Name too long (max 120 characters), got {len(self.name)}",
                self.name[:80],
            )

        if not self.department or not self.department.strip():
            raise InvalidDoctorDataError(
                "department", "Department is required", self.department
            )

        if self.email and len(self.email) > 254:
            raise InvalidDoctorDataError(
                "email",
                f"Email too long (max 254 characters), got {len(self.email)}",
                self.email[:80],
            )

    @property
    def is_active(self) -> bool:
        return self.status == DoctorStatus.ACTIVE

    @property
    def has_schedule(self) -> bool:
        """True when at least one day and one slot are published."""
        return bool(self.available_days) and bool(self.time_slots)

    def works_on(self, day: Weekday) -> bool:
        return day in self.available_days

    def is_available(self, day: Weekday, slot: TimeSlot) -> bool:
        return self.is_active and day in self.available_days and slot in self.time_slots

    def update_schedule(
        self,
        department: Optional[str] = None,
        experience: Optional[str] = None,
        available_days: Optional[Iterable] = None,
        time_slots: Optional[Iterable] = None,
        status: Optional[DoctorStatus] = None,
    ) -> None:
        """Apply a profile edit, keeping the registry ordering contract."""
        if department is not None:
            if not department.strip():
                raise InvalidDoctorDataError("department", "Department is required", department)
            self.department = department
        if experience is not None:
            self.experience = experience
        if available_days is not None:
            self.available_days = _dedupe(available_days, Weekday, "available_days")
        if time_slots is not None:
            self.time_slots = _dedupe(time_slots, TimeSlot, "time_slots")
        if status is not None:
            self.status = DoctorStatus(status)
        self.updated_at = datetime.utcnow()

    def set_status(self, status: DoctorStatus) -> None:
        self.status = DoctorStatus(status)
        self.updated_at = datetime.utcnow()
