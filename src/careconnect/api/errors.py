from typing import Dict, Type

from ..domain.errors import (
    AppointmentNotFoundError,
    DoctorNotFoundError,
    DomainError,
    InvalidDoctorDataError,
    InvalidOtpError,
    InvalidRequestDataError,
    InvalidStatusTransitionError,
    InvalidUserDataError,
    QueryNotFoundError,
)


class APIError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, details: dict = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details


class UnauthorizedError(APIError):
    def __init__(self, message: str = "Unauthorized", details: dict = None):
        super().__init__("UNAUTHORIZED", message, 401, details)


class ForbiddenError(APIError):
    def __init__(self, message: str = "Access denied", details: dict = None):
        super().__init__("FORBIDDEN", message, 403, details)


# HTTP status for each domain error; anything unlisted is a 400
DOMAIN_ERROR_STATUS: Dict[Type[DomainError], int] = {
    DoctorNotFoundError: 404,
    QueryNotFoundError: 404,
    AppointmentNotFoundError: 404,
    InvalidStatusTransitionError: 409,
    InvalidRequestDataError: 422,
    InvalidDoctorDataError: 422,
    InvalidUserDataError: 422,
    InvalidOtpError: 400,
}


def status_for_domain_error(exc: DomainError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[error_type]
    return 400
