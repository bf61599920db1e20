"""Doctor management DTOs."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AddDoctorRequest:
    """Request DTO for registering a doctor from the admin console."""

    name: str
    department: str = "General Physician"
    experience: Optional[str] = None
    available_days: List[str] = field(default_factory=list)
    time_slots: List[str] = field(default_factory=list)
    email: Optional[str] = None


@dataclass
class DoctorProfileRequest:
    """Request DTO for a doctor's self-service profile."""

    department: str = "General Physician"
    experience: Optional[str] = None
    available_days: List[str] = field(default_factory=list)
    time_slots: List[str] = field(default_factory=list)
    status: Optional[str] = None


@dataclass
class DoctorSearchRequest:
    department: str
    day: str
