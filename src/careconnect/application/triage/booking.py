"""Auto-assignment of a doctor to a scheduled appointment."""

from datetime import date
from typing import Optional, Sequence

from ...domain.entities.doctor import Doctor
from ...domain.enums.workflow import TimeSlot, Weekday
from .availability import find_available


def weekday_for(requested_date: date) -> Weekday:
    return Weekday.from_date(requested_date)


def assign_for_booking(
    department: str,
    requested_date: date,
    time_slot: TimeSlot,
    registry: Sequence[Doctor],
) -> Optional[Doctor]:
    """First doctor free on the requested day and slot, or None."""
    candidates = find_available(department, weekday_for(requested_date), time_slot, registry)
    return candidates[0] if candidates else None
