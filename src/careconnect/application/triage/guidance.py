"""
Triage orchestration: classify symptoms, pick a doctor, compose the advisory.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ...domain.entities.doctor import Doctor
from ...domain.enums.workflow import AdvisoryKind, UrgencyTier
from .doctor_matcher import match_doctor
from .symptom_classifier import classify

HONORIFIC = "Dr."


@dataclass(frozen=True)
class TriageGuidance:
    urgency: UrgencyTier
    advisory_kind: AdvisoryKind
    advisory_text: str
    suggested_doctor_id: Optional[str] = None
    suggested_doctor_name: Optional[str] = None


def display_name(doctor: Doctor) -> str:
    """Doctor name with a single leading honorific."""
    name = doctor.name.strip()
    if name.startswith(HONORIFIC):
        return name
    return f"{HONORIFIC} {name}"


def suggestion_clause(doctor: Doctor, urgency: UrgencyTier) -> str:
    if urgency == UrgencyTier.HIGH:
        return (
            f" EMERGENCY OVERRIDE: {display_name(doctor)} ({doctor.department}) "
            "has been automatically flagged to review your case immediately."
        )
    return (
        f" {display_name(doctor)} ({doctor.department}) is available on "
        f"{doctor.available_days[0].value} at {doctor.time_slots[0].value}."
    )


def build_guidance(symptoms_text: Optional[str], registry: Sequence[Doctor]) -> TriageGuidance:
    assessment = classify(symptoms_text)
    doctor = match_doctor(assessment.target_specialty, registry)

    advisory_text = assessment.advisory_text
    if doctor is not None and doctor.has_schedule:
        advisory_text += suggestion_clause(doctor, assessment.urgency)

    return TriageGuidance(
        urgency=assessment.urgency,
        advisory_kind=assessment.advisory_kind,
        advisory_text=advisory_text,
        suggested_doctor_id=doctor.doctor_id if doctor else None,
        suggested_doctor_name=doctor.name if doctor else None,
    )
