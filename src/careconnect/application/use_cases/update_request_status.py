"""Administrator actions on queries and appointments."""

import logging
from typing import Optional

from ...domain.entities.appointment import Appointment
from ...domain.entities.health_query import HealthQuery
from ...domain.enums.workflow import RequestStatus
from ...domain.errors import (
    AppointmentNotFoundError,
    DoctorNotFoundError,
    InvalidRequestDataError,
    QueryNotFoundError,
)
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.doctor_repo import DoctorRepository
from ..ports.repositories.query_repo import HealthQueryRepository

logger = logging.getLogger(__name__)


def parse_status(value: str) -> RequestStatus:
    try:
        return RequestStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in RequestStatus)
        raise InvalidRequestDataError(
            "status", f"Unknown status '{value}'. Expected one of: {allowed}", value
        ) from None


class UpdateQueryStatusUseCase:
    def __init__(self, query_repository: HealthQueryRepository):
        self._query_repository = query_repository

    async def execute(self, query_id: str, status: str) -> HealthQuery:
        target = parse_status(status)
        query = await self._query_repository.find_by_id(query_id)
        if query is None:
            raise QueryNotFoundError(query_id)

        previous = query.status
        if query.change_status(target):
            query = await self._query_repository.save(query)
            logger.info("Query %s: %s -> %s", query_id, previous.value, target.value)
        return query


class UpdateAppointmentStatusUseCase:
    def __init__(self, appointment_repository: AppointmentRepository):
        self._appointment_repository = appointment_repository

    async def execute(self, appointment_id: str, status: str) -> Appointment:
        target = parse_status(status)
        appointment = await self._appointment_repository.find_by_id(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)

        previous = appointment.status
        if appointment.change_status(target):
            appointment = await self._appointment_repository.save(appointment)
            logger.info(
                "Appointment %s: %s -> %s", appointment_id, previous.value, target.value
            )
        return appointment


class AssignAppointmentDoctorUseCase:
    """Manual override of the auto-assigned doctor. ``None`` clears the assignment."""

    def __init__(
        self,
        appointment_repository: AppointmentRepository,
        doctor_repository: DoctorRepository,
    ):
        self._appointment_repository = appointment_repository
        self._doctor_repository = doctor_repository

    async def execute(self, appointment_id: str, doctor_id: Optional[str]) -> Appointment:
        appointment = await self._appointment_repository.find_by_id(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)

        if doctor_id:
            doctor = await self._doctor_repository.find_by_id(doctor_id)
            if doctor is None:
                raise DoctorNotFoundError(doctor_id)

        appointment.assign_doctor(doctor_id)
        saved = await self._appointment_repository.save(appointment)
        logger.info("Appointment %s reassigned to %s", appointment_id, doctor_id or "nobody")
        return saved
