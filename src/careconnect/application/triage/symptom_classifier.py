"""
Rule-based symptom classification.

Each rule is a set of lowercase keywords checked by plain substring
containment against the lowercased symptom text. Rules are evaluated in
order and the first hit wins.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ...domain.enums.workflow import AdvisoryKind, UrgencyTier

DEFAULT_ADVISORY = "Your query has been recorded. A doctor will review your symptoms soon."


@dataclass(frozen=True)
class SymptomAssessment:
    urgency: UrgencyTier
    advisory_kind: AdvisoryKind
    advisory_text: str
    target_specialty: Optional[str] = None


@dataclass(frozen=True)
class TriageRule:
    keywords: Tuple[str, ...]
    urgency: UrgencyTier
    advisory_kind: AdvisoryKind
    advisory_text: str
    target_specialty: Optional[str] = None

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)

    def to_assessment(self) -> SymptomAssessment:
        return SymptomAssessment(
            urgency=self.urgency,
            advisory_kind=self.advisory_kind,
            advisory_text=self.advisory_text,
            target_specialty=self.target_specialty,
        )


TRIAGE_RULES: Tuple[TriageRule, ...] = (
    TriageRule(
        keywords=("chest pain", "heart"),
        urgency=UrgencyTier.HIGH,
        advisory_kind=AdvisoryKind.DANGER,
        advisory_text=(
            "URGENT: Based on your symptoms of chest pain, please seek emergency "
            "medical attention or call emergency services immediately."
        ),
        target_specialty="Cardiologist",
    ),
    TriageRule(
        keywords=("skin", "rash"),
        urgency=UrgencyTier.NORMAL,
        advisory_kind=AdvisoryKind.SUCCESS,
        advisory_text="Based on your symptoms, we recommend a consultation with a skin specialist.",
        target_specialty="Dermatologist",
    ),
    TriageRule(
        keywords=("bone", "joint", "fracture"),
        urgency=UrgencyTier.NORMAL,
        advisory_kind=AdvisoryKind.SUCCESS,
        advisory_text="We suggest consulting an Orthopedic specialist for this issue.",
        target_specialty="Orthopedic",
    ),
    TriageRule(
        keywords=("child", "baby", "toddler"),
        urgency=UrgencyTier.NORMAL,
        advisory_kind=AdvisoryKind.SUCCESS,
        advisory_text=DEFAULT_ADVISORY,
        target_specialty="Pediatrician",
    ),
    TriageRule(
        keywords=("injury",),
        urgency=UrgencyTier.MEDIUM,
        advisory_kind=AdvisoryKind.WARNING,
        advisory_text=(
            "Based on your symptoms, we recommend a doctor consultation to "
            "properly assess the injury."
        ),
    ),
    TriageRule(
        keywords=("fever",),
        urgency=UrgencyTier.LOW,
        advisory_kind=AdvisoryKind.INFO,
        advisory_text="We noticed you have a fever. Ensure you get plenty of rest and stay hydrated.",
    ),
    TriageRule(
        keywords=("headache",),
        urgency=UrgencyTier.LOW,
        advisory_kind=AdvisoryKind.INFO,
        advisory_text="For your headache, we suggest resting in a quiet, dark room and staying hydrated.",
    ),
    TriageRule(
        keywords=("cough",),
        urgency=UrgencyTier.LOW,
        advisory_kind=AdvisoryKind.INFO,
        advisory_text="Since you mentioned a cough, we suggest monitoring it and staying hydrated.",
    ),
)

DEFAULT_ASSESSMENT = SymptomAssessment(
    urgency=UrgencyTier.NORMAL,
    advisory_kind=AdvisoryKind.SUCCESS,
    advisory_text=DEFAULT_ADVISORY,
)


def classify(symptoms_text: Optional[str]) -> SymptomAssessment:
    """Classify free-text symptoms into an urgency tier and advisory."""
    text = (symptoms_text or "").lower()
    if not text.strip():
        return DEFAULT_ASSESSMENT
    for rule in TRIAGE_RULES:
        if rule.matches(text):
            return rule.to_assessment()
    return DEFAULT_ASSESSMENT
