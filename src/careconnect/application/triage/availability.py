"""Availability intersection over the doctor registry."""

from typing import List, Sequence

from ...domain.entities.doctor import Doctor
from ...domain.enums.workflow import TimeSlot, Weekday


def find_available(
    department: str,
    day_of_week: Weekday,
    time_slot: TimeSlot,
    registry: Sequence[Doctor],
) -> List[Doctor]:
    """Active doctors whose department starts with ``department`` and who
    work ``day_of_week`` in ``time_slot``, in registry order."""
    day = Weekday(day_of_week)
    slot = TimeSlot(time_slot)
    return [
        doctor
        for doctor in registry
        if doctor.department.startswith(department) and doctor.is_available(day, slot)
    ]
