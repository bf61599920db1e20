"""Doctor registry management: admin registration, self-service profiles, search."""

import logging
from datetime import date
from typing import List, Optional, Tuple

from ...core.constants import ALL_DEPARTMENTS
from ...domain.entities.doctor import Doctor
from ...domain.entities.user import User
from ...domain.enums.workflow import DoctorStatus, Weekday
from ...domain.errors import (
    DoctorNotFoundError,
    InvalidDoctorDataError,
    InvalidRequestDataError,
)
from ...domain.value_objects.record_id import RecordId
from ..dto.doctor_dto import AddDoctorRequest, DoctorProfileRequest, DoctorSearchRequest
from ..ports.repositories.doctor_repo import DoctorRepository

logger = logging.getLogger(__name__)


def _require_schedule(available_days: List[str], time_slots: List[str]) -> None:
    if not available_days:
        raise InvalidDoctorDataError("available_days", "Select at least one day")
    if not time_slots:
        raise InvalidDoctorDataError("time_slots", "Select at least one slot")


def _parse_doctor_status(value: str) -> DoctorStatus:
    try:
        return DoctorStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in DoctorStatus)
        raise InvalidDoctorDataError(
            "status", f"Unknown status '{value}'. Expected one of: {allowed}", value
        ) from None


class AddDoctorUseCase:
    """Register a new Active doctor at the end of the registry."""

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, request: AddDoctorRequest) -> Doctor:
        if not request.name or not request.name.strip():
            raise InvalidDoctorDataError("name", "Name is required", request.name)
        _require_schedule(request.available_days, request.time_slots)

        doctor = Doctor(
            doctor_id=RecordId.generate("d").value,
            name=request.name.strip(),
            department=request.department,
            experience=request.experience,
            available_days=request.available_days,
            time_slots=request.time_slots,
            status=DoctorStatus.ACTIVE,
            email=request.email,
        )
        saved = await self._doctor_repository.save(doctor)
        logger.info("Doctor %s registered in %s", saved.doctor_id, saved.department)
        return saved


class UpsertDoctorProfileUseCase:
    """Create or update the profile linked to the signed-in doctor account."""

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, user: User, request: DoctorProfileRequest) -> Tuple[Doctor, bool]:
        """Returns the stored profile and whether it was newly created."""
        _require_schedule(request.available_days, request.time_slots)
        status = _parse_doctor_status(request.status) if request.status else None

        existing = await self._doctor_repository.find_by_email_or_name(user.email, user.name)
        if existing is not None:
            existing.update_schedule(
                department=request.department,
                experience=request.experience,
                available_days=request.available_days,
                time_slots=request.time_slots,
                status=status,
            )
            saved = await self._doctor_repository.save(existing)
            logger.info("Doctor profile %s updated", saved.doctor_id)
            return saved, False

        doctor = Doctor(
            doctor_id=RecordId.generate("d").value,
            name=user.name,
            email=user.email,
            department=request.department,
            experience=request.experience,
            available_days=request.available_days,
            time_slots=request.time_slots,
            status=status or DoctorStatus.ACTIVE,
        )
        saved = await self._doctor_repository.save(doctor)
        logger.info("Doctor profile %s created for user %s", saved.doctor_id, user.user_id)
        return saved, True


class UpdateDoctorStatusUseCase:
    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, doctor_id: str, status: str) -> Doctor:
        target = _parse_doctor_status(status)
        doctor = await self._doctor_repository.find_by_id(doctor_id)
        if doctor is None:
            raise DoctorNotFoundError(doctor_id)
        doctor.set_status(target)
        saved = await self._doctor_repository.save(doctor)
        logger.info("Doctor %s is now %s", doctor_id, target.value)
        return saved


class SearchDoctorsUseCase:
    """Active doctors working a given day, in one department or all of them.

    Unlike booking, the department must match the stored label exactly.
    """

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, request: DoctorSearchRequest) -> List[Doctor]:
        try:
            day = Weekday(request.day)
        except ValueError:
            raise InvalidRequestDataError("day", f"Unknown day '{request.day}'", request.day) from None

        registry = await self._doctor_repository.find_all()
        return [
            doctor
            for doctor in registry
            if (request.department == ALL_DEPARTMENTS or doctor.department == request.department)
            and doctor.works_on(day)
            and doctor.is_active
        ]


class ListDoctorsUseCase:
    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, on_duty: Optional[date] = None) -> List[Doctor]:
        """Whole registry, or only Active doctors working on the ``on_duty`` date."""
        registry = await self._doctor_repository.find_all()
        if on_duty is None:
            return registry
        day = Weekday.from_date(on_duty)
        return [doctor for doctor in registry if doctor.is_active and doctor.works_on(day)]
