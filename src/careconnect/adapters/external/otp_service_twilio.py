"""
Twilio Verify implementation of OtpService.
"""

import asyncio
import logging
from typing import Optional

from requests.exceptions import RequestException
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from careconnect.application.ports.services.otp_service import OtpService
from careconnect.core.config import TwilioSettings, get_settings
from careconnect.core.exceptions import OTPServiceError


class TwilioOtpService(OtpService):
    """Twilio Verify implementation of OtpService.

    The Twilio SDK is synchronous, so each call runs in a worker thread.
    Nothing is retried: a provider failure surfaces as OTPServiceError.
    """

    def __init__(self, settings: Optional[TwilioSettings] = None, client: Optional[Client] = None):
        self._settings = settings or get_settings().twilio
        self._logger = logging.getLogger("careconnect")
        self._client = client

        if self._client is None and self._settings.is_configured:
            self._client = Client(self._settings.account_sid, self._settings.auth_token)
        if self._client is None:
            self._logger.warning(
                "[OtpService] TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN / TWILIO_VERIFY_SERVICE_SID not set - OTP flow disabled"
            )

    def _service(self):
        if self._client is None:
            raise OTPServiceError("Twilio Verify is not configured")
        return self._client.verify.v2.services(self._settings.verify_service_sid)

    def _create_verification(self, phone_number: str) -> str:
        verification = self._service().verifications.create(
            to=phone_number, channel=self._settings.channel
        )
        return verification.status

    def _create_verification_check(self, phone_number: str, code: str) -> str:
        check = self._service().verification_checks.create(to=phone_number, code=code)
        return check.status

    async def send_code(self, phone_number: str) -> str:
        try:
            return await asyncio.to_thread(self._create_verification, phone_number)
        except TwilioRestException as e:
            self._logger.error(f"Error sending OTP: {e.msg}")
            raise OTPServiceError(e.msg, {"status": e.status, "code": e.code}) from e
        except TwilioException as e:
            self._logger.error(f"Error sending OTP: {e}")
            raise OTPServiceError(str(e)) from e
        except RequestException as e:
            self._logger.error(f"Error reaching Twilio while sending OTP: {e}")
            raise OTPServiceError(str(e), {"transport": type(e).__name__}) from e

    async def check_code(self, phone_number: str, code: str) -> str:
        try:
            return await asyncio.to_thread(self._create_verification_check, phone_number, code)
        except TwilioRestException as e:
            self._logger.error(f"Error verifying OTP: {e.msg}")
            raise OTPServiceError(e.msg, {"status": e.status, "code": e.code}) from e
        except TwilioException as e:
            self._logger.error(f"Error verifying OTP: {e}")
            raise OTPServiceError(str(e)) from e
        except RequestException as e:
            self._logger.error(f"Error reaching Twilio while verifying OTP: {e}")
            raise OTPServiceError(str(e), {"transport": type(e).__name__}) from e
