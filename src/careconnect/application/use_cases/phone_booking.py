"""OTP-gated booking by phone number."""

import logging

from ...domain.entities.phone_booking import PhoneBooking
from ...domain.errors import InvalidOtpError, InvalidRequestDataError
from ..ports.repositories.phone_booking_repo import PhoneBookingRepository
from ..ports.services.otp_service import OtpService

logger = logging.getLogger(__name__)

APPROVED = "approved"


class SendOtpUseCase:
    def __init__(self, otp_service: OtpService):
        self._otp_service = otp_service

    async def execute(self, phone_number: str) -> str:
        """Send a code and return the provider's verification status."""
        if not phone_number or not phone_number.strip():
            raise InvalidRequestDataError("phoneNumber", "Phone number is required")
        status = await self._otp_service.send_code(phone_number.strip())
        logger.info("OTP sent, status=%s", status)
        return status


class VerifyOtpBookingUseCase:
    """Check the code and, once approved, store a Pending phone booking."""

    def __init__(self, otp_service: OtpService, booking_repository: PhoneBookingRepository):
        self._otp_service = otp_service
        self._booking_repository = booking_repository

    async def execute(self, name: str, phone_number: str, code: str) -> PhoneBooking:
        if not (name and name.strip()) or not (phone_number and phone_number.strip()) or not code:
            raise InvalidRequestDataError(
                "phoneNumber", "Name, phone number, and code are required"
            )

        status = await self._otp_service.check_code(phone_number.strip(), code)
        if status != APPROVED:
            raise InvalidOtpError(status)

        booking = await self._booking_repository.save(
            PhoneBooking(name=name.strip(), phone=phone_number.strip())
        )
        logger.info("Phone booking saved for %s", booking.name)
        return booking
