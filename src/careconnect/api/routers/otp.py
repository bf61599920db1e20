"""
Phone OTP booking endpoints.

These keep the plain ``{success, ...}`` bodies the web client reads
instead of the ApiResponse envelope.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...application.use_cases.phone_booking import SendOtpUseCase, VerifyOtpBookingUseCase
from ...core.exceptions import ExternalServiceError
from ...domain.errors import InvalidOtpError, InvalidRequestDataError
from ..deps import OtpServiceDep, PhoneBookingRepositoryDep
from ..schemas.otp import SendOtpRequestSchema, VerifyOtpRequestSchema

router = APIRouter(prefix="/api", tags=["otp"])
logger = logging.getLogger("careconnect")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.post("/send-otp")
async def send_otp(request: SendOtpRequestSchema, otp_service: OtpServiceDep):
    try:
        verification_status = await SendOtpUseCase(otp_service).execute(request.phoneNumber)
    except InvalidRequestDataError as e:
        return _error(400, e.message)
    except ExternalServiceError as e:
        logger.error(f"Error sending OTP: {e.message}")
        return _error(500, e.provider_message)
    except Exception as e:
        logger.error(f"Error sending OTP: {e}", exc_info=True)
        return _error(500, str(e))
    return {"success": True, "status": verification_status}


@router.post("/verify-otp")
async def verify_otp(
    request: VerifyOtpRequestSchema,
    otp_service: OtpServiceDep,
    booking_repo: PhoneBookingRepositoryDep,
):
    try:
        booking = await VerifyOtpBookingUseCase(otp_service, booking_repo).execute(
            request.name, request.phoneNumber, request.code
        )
    except (InvalidRequestDataError, InvalidOtpError) as e:
        return _error(400, e.message)
    except ExternalServiceError as e:
        logger.error(f"Error verifying OTP: {e.message}")
        return _error(500, e.provider_message)
    except Exception as e:
        # Storage failures are reported the same way as provider failures
        logger.error(f"Error saving phone booking: {e}", exc_info=True)
        return _error(500, str(e))

    logger.info(f"Successfully saved appointment for: {booking.name}")
    return {"success": True, "message": "OTP verified and appointment saved successfully"}
