"""Health query entity: a patient's symptom submission plus its triage outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums.workflow import (
    AdvisoryKind,
    RequestStatus,
    UrgencyTier,
    ensure_transition,
)
from ..errors import InvalidRequestDataError

MIN_AGE = 0
MAX_AGE = 120


@dataclass
class HealthQuery:
    """Health query domain entity."""

    query_id: str
    user_id: Optional[str]
    patient_name: str
    age: int
    symptoms: str
    gender: Optional[str] = None
    category: str = "General Consultation"
    status: RequestStatus = RequestStatus.PENDING
    advisory_text: str = ""
    advisory_kind: AdvisoryKind = AdvisoryKind.SUCCESS
    urgency: UrgencyTier = UrgencyTier.NORMAL
    assigned_doctor_id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.status = RequestStatus(self.status)
        self.advisory_kind = AdvisoryKind(self.advisory_kind)
        self.urgency = UrgencyTier(self.urgency)
        self._validate_query_data()

    def _validate_query_data(self) -> None:
        if self.age is None or isinstance(self.age, bool):
            raise InvalidRequestDataError("age", "Age is required", self.age)
        if not isinstance(self.age, int) or not MIN_AGE <= self.age <= MAX_AGE:
            raise InvalidRequestDataError(
                "age", f"Age must be between {MIN_AGE} and {MAX_AGE}", self.age
            )
        if not self.symptoms or not self.symptoms.strip():
            raise InvalidRequestDataError("symptoms", "Symptoms are required", self.symptoms)
        if not self.patient_name or not self.patient_name.strip():
            raise InvalidRequestDataError("patient_name", "Patient name is required")
        if not self.category or not self.category.strip():
            self.category = "General Consultation"

    @property
    def is_emergency(self) -> bool:
        return self.category == "Emergency"

    def change_status(self, target: RequestStatus) -> bool:
        """Move through the review workflow. Returns False when nothing changed."""
        target = RequestStatus(target)
        if not ensure_transition(self.status, target):
            return False
        self.status = target
        return True
