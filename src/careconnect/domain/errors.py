"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DoctorNotFoundError(DomainError):
    """Doctor not found."""

    def __init__(self, doctor_id: str) -> None:
        message = f"Doctor with ID '{doctor_id}' not found"
        super().__init__(message, "DOCTOR_NOT_FOUND", {"doctor_id": doctor_id})


class QueryNotFoundError(DomainError):
    """Health query not found."""

    def __init__(self, query_id: str) -> None:
        message = f"Query with ID '{query_id}' not found"
        super().__init__(message, "QUERY_NOT_FOUND", {"query_id": query_id})


class AppointmentNotFoundError(DomainError):
    """Appointment not found."""

    def __init__(self, appointment_id: str) -> None:
        message = f"Appointment with ID '{appointment_id}' not found"
        super().__init__(
            message, "APPOINTMENT_NOT_FOUND", {"appointment_id": appointment_id}
        )


class InvalidRequestDataError(DomainError):
    """Invalid query or appointment data."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        super().__init__(
            message, "INVALID_REQUEST_DATA", {"field": field, "value": value}
        )


class InvalidDoctorDataError(DomainError):
    """Invalid doctor data."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        super().__init__(
            message, "INVALID_DOCTOR_DATA", {"field": field, "value": value}
        )


class InvalidUserDataError(DomainError):
    """Invalid account data."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, "INVALID_USER_DATA", {"field": field})


class InvalidStatusTransitionError(DomainError):
    """Status change not allowed by the review workflow."""

    def __init__(self, current: str, target: str) -> None:
        message = f"Cannot change status from '{current}' to '{target}'"
        super().__init__(
            message,
            "INVALID_STATUS_TRANSITION",
            {"current_status": current, "target_status": target},
        )


class InvalidOtpError(DomainError):
    """Verification code rejected by the provider."""

    def __init__(self, status: str = "") -> None:
        super().__init__("Invalid OTP", "INVALID_OTP", {"status": status})
