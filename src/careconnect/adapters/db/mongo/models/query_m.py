"""MongoDB Beanie model for health query documents."""

from datetime import datetime
from typing import Optional

from beanie import Document
from pydantic import Field


class HealthQueryMongo(Document):
    """MongoDB model for HealthQuery entity."""

    query_id: str = Field(..., description="Query ID", unique=True)
    user_id: Optional[str] = Field(None, description="Submitting patient account")
    patient_name: str = Field(..., description="Patient display name")
    age: int = Field(..., description="Patient age in years")
    gender: Optional[str] = Field(None)
    category: str = Field(default="General Consultation")
    symptoms: str = Field(..., description="Free-text symptom description")
    # Stored as text so labels written by older releases still load
    status: str = Field(default="Pending")
    advisory_text: str = Field(default="")
    advisory_kind: str = Field(default="success")
    urgency: str = Field(default="Normal")
    assigned_doctor_id: Optional[str] = Field(None, description="Suggested doctor")
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "queries"
        indexes = [
            "query_id",
            "user_id",
            "category",
            "created_at",
        ]
