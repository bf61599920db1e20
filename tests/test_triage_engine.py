"""
Symptom classification, doctor matching, availability and booking assignment.
"""

from datetime import date

import pytest

from careconnect.application.triage import (
    assign_for_booking,
    build_guidance,
    classify,
    find_available,
    match_doctor,
    weekday_for,
)
from careconnect.application.triage.symptom_classifier import DEFAULT_ADVISORY, TRIAGE_RULES
from careconnect.domain.entities import Doctor
from careconnect.domain.enums import AdvisoryKind, DoctorStatus, TimeSlot, UrgencyTier, Weekday

MONDAY = date(2024, 1, 1)
TUESDAY = date(2024, 1, 2)
SUNDAY = date(2024, 1, 7)


def make_doctor(doctor_id, department, days=("Monday",), slots=("Morning",), **kwargs):
    return Doctor(
        doctor_id=doctor_id,
        name=kwargs.pop("name", f"Dr. {doctor_id.upper()}"),
        department=department,
        available_days=list(days),
        time_slots=list(slots),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    [
        "Chest pain since morning",
        "my HEART races",
        "heart palpitations with a skin rash and fever",
        "child with chest pain and a cough",
    ],
)
def test_cardiac_keywords_win_over_later_rules(text):
    assessment = classify(text)
    assert assessment.urgency == UrgencyTier.HIGH
    assert assessment.advisory_kind == AdvisoryKind.DANGER
    assert assessment.target_specialty == "Cardiologist"
    assert assessment.advisory_text.startswith("URGENT:")


@pytest.mark.parametrize(
    "text,urgency,specialty",
    [
        ("itchy rash on arms", UrgencyTier.NORMAL, "Dermatologist"),
        ("my knee joint hurts", UrgencyTier.NORMAL, "Orthopedic"),
        ("possible fracture", UrgencyTier.NORMAL, "Orthopedic"),
        ("my baby will not eat", UrgencyTier.NORMAL, "Pediatrician"),
        ("sports injury", UrgencyTier.MEDIUM, None),
        ("high fever", UrgencyTier.LOW, None),
        ("persistent headache", UrgencyTier.LOW, None),
        ("dry cough", UrgencyTier.LOW, None),
    ],
)
def test_rule_outcomes(text, urgency, specialty):
    assessment = classify(text)
    assert assessment.urgency == urgency
    assert assessment.target_specialty == specialty


def test_skin_rule_precedes_bone_rule():
    assert classify("skin peeling over a bone").target_specialty == "Dermatologist"


def test_keywords_match_inside_words():
    # "heartburn" contains "heart"
    assert classify("heartburn after dinner").urgency == UrgencyTier.HIGH


@pytest.mark.parametrize("text", ["", "   ", None, "I feel tired"])
def test_default_assessment(text):
    assessment = classify(text)
    assert assessment.urgency == UrgencyTier.NORMAL
    assert assessment.advisory_kind == AdvisoryKind.SUCCESS
    assert assessment.target_specialty is None
    assert assessment.advisory_text == DEFAULT_ADVISORY


def test_pediatric_rule_uses_default_advisory():
    assert classify("toddler keeps crying").advisory_text == DEFAULT_ADVISORY


def test_rules_are_ordered_by_priority():
    assert TRIAGE_RULES[0].urgency == UrgencyTier.HIGH
    assert [r.target_specialty for r in TRIAGE_RULES[:4]] == [
        "Cardiologist",
        "Dermatologist",
        "Orthopedic",
        "Pediatrician",
    ]


def test_classify_is_repeatable():
    assert classify("fever and cough") == classify("fever and cough")


# ---------------------------------------------------------------------------
# match_doctor
# ---------------------------------------------------------------------------


def test_match_specialist_first_in_registry_order(registry):
    assert match_doctor("Cardiologist", registry).doctor_id == "d1"
    assert match_doctor("Orthopedic", registry).doctor_id == "d6"


def test_match_skips_doctors_on_leave(registry):
    registry[0].set_status(DoctorStatus.ON_LEAVE)
    assert match_doctor("Cardiologist", registry).doctor_id == "d2"


def test_match_falls_back_to_general_physician(registry):
    assert match_doctor("Neurosurgeon", registry).doctor_id == "d8"
    assert match_doctor(None, registry).doctor_id == "d8"


def test_match_returns_none_without_specialist_or_general():
    registry = [make_doctor("x1", "Dermatologist (Skin)")]
    assert match_doctor("Cardiologist", registry) is None


def test_match_is_case_sensitive():
    registry = [make_doctor("x1", "cardiologist"), make_doctor("x2", "General Physician")]
    assert match_doctor("Cardiologist", registry).doctor_id == "x2"


def test_match_uses_containment():
    registry = [make_doctor("x1", "Pediatric Cardiologist")]
    assert match_doctor("Cardiologist", registry).doctor_id == "x1"


def test_match_is_repeatable(registry):
    assert match_doctor("Pediatrician", registry) == match_doctor("Pediatrician", registry)


def test_match_on_empty_registry():
    assert match_doctor("Cardiologist", []) is None


# ---------------------------------------------------------------------------
# find_available / assign_for_booking
# ---------------------------------------------------------------------------


def test_find_available_requires_department_prefix():
    registry = [
        make_doctor("x1", "Cardiologist (Heart)"),
        make_doctor("x2", "Pediatric Cardiologist"),
    ]
    found = find_available("Cardiologist", Weekday.MONDAY, TimeSlot.MORNING, registry)
    assert [d.doctor_id for d in found] == ["x1"]


def test_find_available_intersects_day_and_slot(registry):
    found = find_available("Cardiologist", Weekday.MONDAY, TimeSlot.AFTERNOON, registry)
    assert [d.doctor_id for d in found] == ["d1", "d3"]

    found = find_available("General Physician", Weekday.SATURDAY, TimeSlot.EVENING, registry)
    assert [d.doctor_id for d in found] == ["d8", "d10"]


def test_find_available_excludes_inactive(registry):
    registry[7].set_status(DoctorStatus.ON_LEAVE)
    found = find_available("General Physician", Weekday.MONDAY, TimeSlot.MORNING, registry)
    assert [d.doctor_id for d in found] == ["d9"]


def test_empty_department_matches_every_department(registry):
    found = find_available("", Weekday.MONDAY, TimeSlot.MORNING, registry)
    assert [d.doctor_id for d in found] == ["d1", "d8", "d9", "d11", "d13"]


def test_weekday_for_uses_calendar_date():
    assert weekday_for(MONDAY) == Weekday.MONDAY
    assert weekday_for(SUNDAY) == Weekday.SUNDAY


def test_assign_for_booking_picks_first_available(registry):
    doctor = assign_for_booking("Cardiologist", MONDAY, TimeSlot.AFTERNOON, registry)
    assert doctor.doctor_id == "d1"


@pytest.mark.parametrize("department", ["Cardiologist", "General Physician", "Pediatrician", ""])
@pytest.mark.parametrize("slot", list(TimeSlot))
def test_no_assignment_on_sunday(registry, department, slot):
    assert assign_for_booking(department, SUNDAY, slot, registry) is None


def test_no_assignment_for_unstaffed_slot(registry):
    assert assign_for_booking("Dermatologist", MONDAY, TimeSlot.MORNING, registry) is None


# ---------------------------------------------------------------------------
# build_guidance
# ---------------------------------------------------------------------------


def test_emergency_override_names_the_cardiologist():
    registry = [make_doctor("c1", "Cardiologist", name="Dr. Heart")]
    guidance = build_guidance("chest pain", registry)

    assert guidance.urgency == UrgencyTier.HIGH
    assert guidance.suggested_doctor_id == "c1"
    assert guidance.advisory_text.endswith(
        " EMERGENCY OVERRIDE: Dr. Heart (Cardiologist) has been automatically "
        "flagged to review your case immediately."
    )


def test_headache_falls_back_to_general_physician():
    registry = [
        make_doctor("a", "General Physician", days=["Tuesday"], slots=["Evening"], name="Dr. A")
    ]
    guidance = build_guidance("persistent headache", registry)

    assert guidance.urgency == UrgencyTier.LOW
    assert guidance.suggested_doctor_name == "Dr. A"
    assert guidance.advisory_text.endswith(
        " Dr. A (General Physician) is available on Tuesday at Evening."
    )


def test_honorific_is_added_once():
    registry = [make_doctor("a", "General Physician", name="Priya Rao")]
    guidance = build_guidance("fever", registry)
    assert "Dr. Priya Rao (General Physician)" in guidance.advisory_text
    assert "Dr. Dr." not in guidance.advisory_text


def test_clause_uses_first_listed_day_and_slot():
    registry = [
        make_doctor(
            "a", "General Physician", days=["Friday", "Monday"], slots=["Evening", "Morning"]
        )
    ]
    guidance = build_guidance("cough", registry)
    assert guidance.advisory_text.endswith("is available on Friday at Evening.")


def test_no_clause_without_schedule():
    registry = [make_doctor("a", "General Physician", days=[], slots=[])]
    guidance = build_guidance("fever", registry)
    assert guidance.advisory_text == classify("fever").advisory_text
    assert guidance.suggested_doctor_id == "a"


def test_no_doctor_means_plain_advisory():
    guidance = build_guidance("chest pain", [])
    assert guidance.advisory_text == classify("chest pain").advisory_text
    assert guidance.suggested_doctor_id is None
    assert guidance.suggested_doctor_name is None
