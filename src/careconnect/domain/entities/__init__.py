"""
Domain entities package.
"""

from .appointment import Appointment
from .doctor import Doctor
from .health_query import HealthQuery
from .phone_booking import PhoneBooking
from .user import User

__all__ = [
    "Appointment",
    "Doctor",
    "HealthQuery",
    "PhoneBooking",
    "User",
]
