"""
Schemas for the doctor registry.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.entities.doctor import Doctor


class DoctorSchema(BaseModel):
    doctor_id: str
    name: str
    department: str
    experience: Optional[str] = None
    email: Optional[str] = None
    available_days: List[str]
    time_slots: List[str]
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, doctor: Doctor) -> "DoctorSchema":
        return cls(
            doctor_id=doctor.doctor_id,
            name=doctor.name,
            department=doctor.department,
            experience=doctor.experience,
            email=doctor.email,
            available_days=[d.value for d in doctor.available_days],
            time_slots=[s.value for s in doctor.time_slots],
            status=doctor.status.value,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )


class AddDoctorRequestSchema(BaseModel):
    name: str = Field("", description="Display name, e.g. 'Dr. Sarah Smith'")
    department: str = Field("General Physician")
    experience: Optional[str] = Field(None, description="e.g. '12 Years'")
    email: Optional[str] = None
    available_days: List[str] = Field(default_factory=list)
    time_slots: List[str] = Field(default_factory=list)


class DoctorProfileRequestSchema(BaseModel):
    department: str = Field("General Physician")
    experience: Optional[str] = None
    available_days: List[str] = Field(default_factory=list)
    time_slots: List[str] = Field(default_factory=list)
    status: Optional[str] = Field(None, description="Active / On Leave")


class DoctorStatusSchema(BaseModel):
    status: str = Field(..., description="Active / On Leave")
