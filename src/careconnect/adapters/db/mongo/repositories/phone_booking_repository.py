"""
MongoDB implementation of PhoneBookingRepository.
"""

from careconnect.application.ports.repositories.phone_booking_repo import PhoneBookingRepository
from careconnect.domain.entities.phone_booking import PhoneBooking

from ..models.phone_booking_m import PhoneBookingMongo


class MongoPhoneBookingRepository(PhoneBookingRepository):
    """MongoDB implementation of PhoneBookingRepository."""

    async def save(self, booking: PhoneBooking) -> PhoneBooking:
        booking_mongo = PhoneBookingMongo(
            name=booking.name,
            phone=booking.phone,
            status=booking.status,
            created_at=booking.created_at,
        )
        await booking_mongo.insert()
        booking.booking_id = str(booking_mongo.id)
        return booking
