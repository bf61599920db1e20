"""MongoDB Beanie model for appointment documents."""

from datetime import datetime
from typing import Optional

from beanie import Document
from pydantic import Field


class AppointmentMongo(Document):
    """MongoDB model for Appointment entity."""

    appointment_id: str = Field(..., description="Appointment ID", unique=True)
    user_id: Optional[str] = Field(None, description="Booking patient account")
    patient_name: str = Field(..., description="Patient display name")
    department: str = Field(default="General Physician")
    # BSON has no date type; midnight of the requested day
    requested_date: datetime = Field(..., description="Requested calendar day")
    time_slot: str = Field(default="Morning")
    status: str = Field(default="Pending")
    assigned_doctor_id: Optional[str] = Field(None)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "appointments"
        indexes = [
            "appointment_id",
            "user_id",
            "assigned_doctor_id",
            "requested_date",
            "created_at",
        ]
