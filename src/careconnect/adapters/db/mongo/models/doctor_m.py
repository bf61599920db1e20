"""MongoDB Beanie model for Doctor documents."""

from datetime import datetime
from typing import List, Optional

from beanie import Document
from pydantic import Field


class DoctorMongo(Document):
    """MongoDB model for the doctor registry."""

    doctor_id: str = Field(..., description="Doctor ID", unique=True)
    name: str = Field(..., description="Doctor display name")
    department: str = Field(..., description="Specialty label, e.g. 'Cardiologist (Heart)'")
    experience: Optional[str] = Field(None, description="Free-text experience, e.g. '12 Years'")
    email: Optional[str] = Field(None, description="Email of the linked doctor account")
    available_days: List[str] = Field(default_factory=list, description="Ordered weekday names")
    time_slots: List[str] = Field(default_factory=list, description="Ordered time slots")
    status: str = Field(default="Active", description="Active / On Leave")
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "doctors"
        indexes = [
            "doctor_id",
            "email",
            "status",
            "created_at",
        ]
