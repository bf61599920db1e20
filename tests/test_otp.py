"""
Phone OTP routes and the Twilio Verify adapter.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from requests.exceptions import ConnectionError as RequestsConnectionError
from twilio.base.exceptions import TwilioRestException

from careconnect.adapters.external.otp_service_twilio import TwilioOtpService
from careconnect.api import deps
from careconnect.app import app
from careconnect.core.config import TwilioSettings
from careconnect.core.exceptions import OTPServiceError


def test_send_otp(client, otp_service):
    response = client.post("/api/send-otp", json={"phoneNumber": "+15550001111"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "status": "pending"}
    assert otp_service.sent == ["+15550001111"]


def test_send_otp_requires_phone(client):
    response = client.post("/api/send-otp", json={})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Phone number is required"}


def test_send_otp_provider_failure(client, otp_service):
    otp_service.fail_with = "Invalid parameter `To`"
    response = client.post("/api/send-otp", json={"phoneNumber": "bad"})
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Invalid parameter `To`"}


def test_verify_otp_saves_booking(client, booking_repo):
    response = client.post(
        "/api/verify-otp", json={"phoneNumber": "+15550001111", "code": "123456", "name": "Ann"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "OTP verified and appointment saved successfully",
    }
    assert [(b.name, b.phone, b.status) for b in booking_repo.bookings] == [
        ("Ann", "+15550001111", "Pending")
    ]


def test_verify_otp_wrong_code(client, otp_service, booking_repo):
    otp_service.check_status = "pending"
    response = client.post(
        "/api/verify-otp", json={"phoneNumber": "+15550001111", "code": "000000", "name": "Ann"}
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid OTP"}
    assert booking_repo.bookings == []


def test_verify_otp_missing_fields(client):
    response = client.post("/api/verify-otp", json={"phoneNumber": "+15550001111"})
    assert response.status_code == 400
    assert response.json()["error"] == "Name, phone number, and code are required"


def test_verify_otp_provider_failure(client, otp_service):
    otp_service.fail_with = "Service unavailable"
    response = client.post(
        "/api/verify-otp", json={"phoneNumber": "+1555", "code": "1", "name": "Ann"}
    )
    assert response.status_code == 500
    assert response.json()["error"] == "Service unavailable"


# ---------------------------------------------------------------------------
# Twilio adapter
# ---------------------------------------------------------------------------


@pytest.fixture
def twilio_settings():
    return TwilioSettings(
        account_sid="AC123", auth_token="token", verify_service_sid="VA123", channel="sms"
    )


@pytest.mark.asyncio
async def test_adapter_sends_and_checks(twilio_settings):
    client = MagicMock()
    service = client.verify.v2.services.return_value
    service.verifications.create.return_value = SimpleNamespace(status="pending")
    service.verification_checks.create.return_value = SimpleNamespace(status="approved")

    otp = TwilioOtpService(settings=twilio_settings, client=client)

    assert await otp.send_code("+15550001111") == "pending"
    service.verifications.create.assert_called_once_with(to="+15550001111", channel="sms")
    client.verify.v2.services.assert_called_with("VA123")

    assert await otp.check_code("+15550001111", "123456") == "approved"
    service.verification_checks.create.assert_called_once_with(to="+15550001111", code="123456")


@pytest.mark.asyncio
async def test_adapter_wraps_provider_errors(twilio_settings):
    client = MagicMock()
    service = client.verify.v2.services.return_value
    service.verifications.create.side_effect = TwilioRestException(
        400, "/Verifications", msg="Invalid parameter `To`", code=60200, method="POST"
    )

    otp = TwilioOtpService(settings=twilio_settings, client=client)
    with pytest.raises(OTPServiceError) as exc:
        await otp.send_code("bad")
    assert exc.value.provider_message == "Invalid parameter `To`"
    assert exc.value.details == {"status": 400, "code": 60200}


@pytest.mark.asyncio
async def test_adapter_without_credentials():
    otp = TwilioOtpService(settings=TwilioSettings(account_sid="", auth_token="", verify_service_sid=""))
    with pytest.raises(OTPServiceError, match="not configured"):
        await otp.send_code("+15550001111")


@pytest.mark.asyncio
async def test_adapter_wraps_connection_errors(twilio_settings):
    client = MagicMock()
    service = client.verify.v2.services.return_value
    service.verifications.create.side_effect = RequestsConnectionError("connection refused")
    service.verification_checks.create.side_effect = RequestsConnectionError("connection reset")

    otp = TwilioOtpService(settings=twilio_settings, client=client)
    with pytest.raises(OTPServiceError) as exc:
        await otp.send_code("+15550001111")
    assert exc.value.provider_message == "connection refused"
    assert exc.value.details == {"transport": "ConnectionError"}

    with pytest.raises(OTPServiceError, match="connection reset"):
        await otp.check_code("+15550001111", "123456")


def test_send_otp_network_failure_keeps_error_body(client, twilio_settings):
    twilio_client = MagicMock()
    service = twilio_client.verify.v2.services.return_value
    service.verifications.create.side_effect = RequestsConnectionError("connection refused")
    app.dependency_overrides[deps.get_otp_service] = lambda: TwilioOtpService(
        settings=twilio_settings, client=twilio_client
    )

    response = client.post("/api/send-otp", json={"phoneNumber": "+15550001111"})
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "connection refused"}


def test_send_otp_unexpected_failure_keeps_error_body(client, otp_service):
    async def broken(phone_number):
        raise RuntimeError("service offline")

    otp_service.send_code = broken
    response = client.post("/api/send-otp", json={"phoneNumber": "+15550001111"})
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "service offline"}
