"""
Schemas for health queries and appointments.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.entities.appointment import Appointment
from ...domain.entities.health_query import HealthQuery


class SubmitQueryRequestSchema(BaseModel):
    age: Optional[int] = Field(None, description="Patient age in years (0-120)")
    symptoms: Optional[str] = Field(None, description="Free-text symptom description")
    gender: Optional[str] = Field(None, description="Male / Female / Other")
    category: Optional[str] = Field(None, description="Informational category, e.g. 'Emergency'")
    patient_name: Optional[str] = Field(None, description="Defaults to the signed-in user's name")


class QuerySchema(BaseModel):
    query_id: str
    user_id: Optional[str] = None
    patient_name: str
    age: int
    gender: Optional[str] = None
    category: str
    symptoms: str
    status: str
    advisory_text: str
    advisory_kind: str
    urgency: str
    assigned_doctor_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, query: HealthQuery) -> "QuerySchema":
        return cls(
            query_id=query.query_id,
            user_id=query.user_id,
            patient_name=query.patient_name,
            age=query.age,
            gender=query.gender,
            category=query.category,
            symptoms=query.symptoms,
            status=query.status.value,
            advisory_text=query.advisory_text,
            advisory_kind=query.advisory_kind.value,
            urgency=query.urgency.value,
            assigned_doctor_id=query.assigned_doctor_id,
            created_at=query.created_at,
        )


class SubmitQueryResponseSchema(BaseModel):
    query: QuerySchema
    suggested_doctor_name: Optional[str] = None


class BookAppointmentRequestSchema(BaseModel):
    requested_date: Optional[date] = Field(None, description="Preferred date (YYYY-MM-DD)")
    department: Optional[str] = Field(None, description="Defaults to General Physician")
    time_slot: Optional[str] = Field(None, description="Morning / Afternoon / Evening")
    patient_name: Optional[str] = Field(None, description="Defaults to the signed-in user's name")


class AppointmentSchema(BaseModel):
    appointment_id: str
    user_id: Optional[str] = None
    patient_name: str
    department: str
    requested_date: date
    time_slot: str
    status: str
    assigned_doctor_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentSchema":
        return cls(
            appointment_id=appointment.appointment_id,
            user_id=appointment.user_id,
            patient_name=appointment.patient_name,
            department=appointment.department,
            requested_date=appointment.requested_date,
            time_slot=appointment.time_slot.value,
            status=appointment.status.value,
            assigned_doctor_id=appointment.assigned_doctor_id,
            created_at=appointment.created_at,
        )


class BookAppointmentResponseSchema(BaseModel):
    appointment: AppointmentSchema
    assigned_doctor_name: Optional[str] = None


class StatusUpdateSchema(BaseModel):
    status: str = Field(..., description="Pending / Under Review / Approved / Rejected")


class AssignDoctorSchema(BaseModel):
    doctor_id: Optional[str] = Field(None, description="Doctor to assign; null clears the assignment")


class PatientRequestsSchema(BaseModel):
    queries: List[QuerySchema] = Field(default_factory=list)
    appointments: List[AppointmentSchema] = Field(default_factory=list)
