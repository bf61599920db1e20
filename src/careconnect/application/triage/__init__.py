"""
Doctor-matching and triage engine.

Pure, synchronous functions over an explicit doctor registry snapshot.
"""

from .availability import find_available
from .booking import assign_for_booking, weekday_for
from .doctor_matcher import match_doctor
from .guidance import TriageGuidance, build_guidance
from .symptom_classifier import SymptomAssessment, TriageRule, classify

__all__ = [
    "SymptomAssessment",
    "TriageGuidance",
    "TriageRule",
    "assign_for_booking",
    "build_guidance",
    "classify",
    "find_available",
    "match_doctor",
    "weekday_for",
]
