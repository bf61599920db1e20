"""Read-side listings for the patient, doctor and admin dashboards."""

from typing import List

from ...core.constants import EMERGENCY_CATEGORY
from ...domain.entities.appointment import Appointment
from ...domain.entities.health_query import HealthQuery
from ...domain.entities.user import User
from ..dto.request_dto import PatientRequests
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.doctor_repo import DoctorRepository
from ..ports.repositories.query_repo import HealthQueryRepository


class ListQueriesUseCase:
    def __init__(self, query_repository: HealthQueryRepository):
        self._query_repository = query_repository

    async def execute(self, emergency_only: bool = False) -> List[HealthQuery]:
        return await self._query_repository.find_all(
            category=EMERGENCY_CATEGORY if emergency_only else None
        )


class ListAppointmentsUseCase:
    def __init__(self, appointment_repository: AppointmentRepository):
        self._appointment_repository = appointment_repository

    async def execute(self) -> List[Appointment]:
        return await self._appointment_repository.find_all()


class ListPatientRequestsUseCase:
    def __init__(
        self,
        query_repository: HealthQueryRepository,
        appointment_repository: AppointmentRepository,
    ):
        self._query_repository = query_repository
        self._appointment_repository = appointment_repository

    async def execute(self, user_id: str) -> PatientRequests:
        return PatientRequests(
            queries=await self._query_repository.find_by_user(user_id),
            appointments=await self._appointment_repository.find_by_user(user_id),
        )


class ListDoctorAppointmentsUseCase:
    """Appointments assigned to the profile linked with a doctor account."""

    def __init__(
        self,
        doctor_repository: DoctorRepository,
        appointment_repository: AppointmentRepository,
    ):
        self._doctor_repository = doctor_repository
        self._appointment_repository = appointment_repository

    async def execute(self, user: User) -> List[Appointment]:
        profile = await self._doctor_repository.find_by_email_or_name(user.email, user.name)
        if profile is None:
            return []
        return await self._appointment_repository.find_by_doctor(profile.doctor_id)
