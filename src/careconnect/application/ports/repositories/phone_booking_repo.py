"""
Phone booking repository interface (OTP-verified bookings).
"""

from abc import ABC, abstractmethod

from ....domain.entities.phone_booking import PhoneBooking


class PhoneBookingRepository(ABC):
    """Abstract repository for OTP-verified phone bookings."""

    @abstractmethod
    async def save(self, booking: PhoneBooking) -> PhoneBooking:
        pass
