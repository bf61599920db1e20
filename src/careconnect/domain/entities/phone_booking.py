"""Minimal booking captured by the phone OTP flow."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ...core.constants import PHONE_BOOKING_PENDING


@dataclass
class PhoneBooking:
    name: str
    phone: str
    status: str = PHONE_BOOKING_PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
    booking_id: Optional[str] = None
