"""Query and appointment DTOs for API communication."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from ...domain.entities.appointment import Appointment
from ...domain.entities.doctor import Doctor
from ...domain.entities.health_query import HealthQuery
from ..triage.guidance import TriageGuidance


@dataclass
class SubmitQueryRequest:
    """Request DTO for a symptom query."""

    user_id: Optional[str]
    patient_name: str
    age: Optional[int]
    symptoms: str
    gender: Optional[str] = None
    category: Optional[str] = None


@dataclass
class SubmitQueryResponse:
    query: HealthQuery
    guidance: TriageGuidance


@dataclass
class BookAppointmentRequest:
    """Request DTO for an appointment booking."""

    user_id: Optional[str]
    patient_name: str
    requested_date: Optional[date]
    department: Optional[str] = None
    time_slot: Optional[str] = None


@dataclass
class BookAppointmentResponse:
    appointment: Appointment
    assigned_doctor: Optional[Doctor] = None


@dataclass
class PatientRequests:
    """A patient's own queries and appointments."""

    queries: List[HealthQuery] = field(default_factory=list)
    appointments: List[Appointment] = field(default_factory=list)
