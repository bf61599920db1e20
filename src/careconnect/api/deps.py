"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Header

from ..adapters.db.mongo.repositories.appointment_repository import MongoAppointmentRepository
from ..adapters.db.mongo.repositories.doctor_repository import MongoDoctorRepository
from ..adapters.db.mongo.repositories.phone_booking_repository import MongoPhoneBookingRepository
from ..adapters.db.mongo.repositories.query_repository import MongoHealthQueryRepository
from ..adapters.db.mongo.repositories.user_repository import MongoUserRepository
from ..adapters.external.otp_service_twilio import TwilioOtpService
from ..application.ports.repositories.appointment_repo import AppointmentRepository
from ..application.ports.repositories.doctor_repo import DoctorRepository
from ..application.ports.repositories.phone_booking_repo import PhoneBookingRepository
from ..application.ports.repositories.query_repo import HealthQueryRepository
from ..application.ports.repositories.user_repo import UserRepository
from ..application.ports.services.otp_service import OtpService
from ..domain.entities.user import User
from ..domain.enums.workflow import UserRole
from .errors import ForbiddenError, UnauthorizedError


@lru_cache()
def get_doctor_repository() -> DoctorRepository:
    return MongoDoctorRepository()


@lru_cache()
def get_query_repository() -> HealthQueryRepository:
    return MongoHealthQueryRepository()


@lru_cache()
def get_appointment_repository() -> AppointmentRepository:
    return MongoAppointmentRepository()


@lru_cache()
def get_user_repository() -> UserRepository:
    return MongoUserRepository()


@lru_cache()
def get_phone_booking_repository() -> PhoneBookingRepository:
    return MongoPhoneBookingRepository()


@lru_cache()
def get_otp_service() -> OtpService:
    """Get OTP service instance (one Twilio client per process)."""
    return TwilioOtpService()


async def get_current_user(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    x_user_id: Annotated[Optional[str], Header()] = None,
) -> User:
    """Resolve the signed-in user from the X-User-ID header."""
    if not x_user_id:
        raise UnauthorizedError("X-User-ID header is required")
    user = await user_repo.find_by_id(x_user_id)
    if user is None:
        raise UnauthorizedError("Unknown user", {"user_id": x_user_id})
    return user


def require_roles(*roles: UserRole):
    """Dependency factory restricting an endpoint to the given roles."""

    async def _check(user: Annotated[User, Depends(get_current_user)]) -> User:
        if not user.has_role(*roles):
            raise ForbiddenError(
                f"This action requires role: {', '.join(r.value for r in roles)}",
                {"role": user.role.value},
            )
        return user

    return _check


# Dependency annotations for FastAPI
DoctorRepositoryDep = Annotated[DoctorRepository, Depends(get_doctor_repository)]
QueryRepositoryDep = Annotated[HealthQueryRepository, Depends(get_query_repository)]
AppointmentRepositoryDep = Annotated[AppointmentRepository, Depends(get_appointment_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
PhoneBookingRepositoryDep = Annotated[PhoneBookingRepository, Depends(get_phone_booking_repository)]
OtpServiceDep = Annotated[OtpService, Depends(get_otp_service)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
AdminUserDep = Annotated[User, Depends(require_roles(UserRole.ADMIN))]
DoctorUserDep = Annotated[User, Depends(require_roles(UserRole.DOCTOR))]
StaffUserDep = Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.DOCTOR))]
