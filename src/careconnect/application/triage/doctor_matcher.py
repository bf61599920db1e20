"""Pick a doctor for a specialty out of the ordered registry."""

from typing import Optional, Sequence

from ...core.constants import GENERAL_SPECIALTY_KEYWORD
from ...domain.entities.doctor import Doctor


def _first_active_in(department_fragment: str, registry: Sequence[Doctor]) -> Optional[Doctor]:
    for doctor in registry:
        if doctor.is_active and department_fragment in doctor.department:
            return doctor
    return None


def match_doctor(target_specialty: Optional[str], registry: Sequence[Doctor]) -> Optional[Doctor]:
    """First active specialist, else first active general physician, else None.

    Matching is case-sensitive containment on the department label and
    follows registry order, so the same doctor may be suggested repeatedly.
    """
    if target_specialty:
        doctor = _first_active_in(target_specialty, registry)
        if doctor is not None:
            return doctor
    return _first_active_in(GENERAL_SPECIALTY_KEYWORD, registry)
