"""
Exception handling for CareConnect application.

This module provides custom exception classes for infrastructure-level
failures. Business rule violations live in ``careconnect.domain.errors``.
"""

from typing import Any, Dict, Optional


class CareConnectException(Exception):
    """Base exception class for CareConnect application."""

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


class DatabaseError(CareConnectException):
    """Raised when there's a database operation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "DATABASE_ERROR", details)


class ExternalServiceError(CareConnectException):
    """Raised when there's an external service error."""

    def __init__(
        self, service: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.service = service
        self.provider_message = message
        full_message = f"{service} service error: {message}"
        super().__init__(full_message, "EXTERNAL_SERVICE_ERROR", details)


class OTPServiceError(ExternalServiceError):
    """Raised when the OTP provider rejects or fails a request."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("OTP", message, details)
