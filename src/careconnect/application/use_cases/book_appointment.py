"""Book an appointment and auto-assign the first available doctor."""

import logging

from ...core.config import get_settings
from ...domain.entities.appointment import Appointment
from ...domain.enums.workflow import RequestStatus, TimeSlot
from ...domain.errors import InvalidRequestDataError
from ...domain.value_objects.record_id import RecordId
from ..dto.request_dto import BookAppointmentRequest, BookAppointmentResponse
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.doctor_repo import DoctorRepository
from ..triage.booking import assign_for_booking

logger = logging.getLogger(__name__)


class BookAppointmentUseCase:
    """Store a Pending appointment, assigned when a doctor is free, otherwise unassigned."""

    def __init__(
        self,
        appointment_repository: AppointmentRepository,
        doctor_repository: DoctorRepository,
    ):
        self._appointment_repository = appointment_repository
        self._doctor_repository = doctor_repository

    async def execute(self, request: BookAppointmentRequest) -> BookAppointmentResponse:
        if request.requested_date is None:
            raise InvalidRequestDataError("requested_date", "Preferred Date is required")

        booking_settings = get_settings().booking
        department = (request.department or "").strip() or booking_settings.default_department
        try:
            time_slot = TimeSlot(request.time_slot or booking_settings.default_time_slot)
        except ValueError:
            raise InvalidRequestDataError(
                "time_slot", f"Unknown time slot '{request.time_slot}'", request.time_slot
            ) from None

        registry = await self._doctor_repository.find_all()
        doctor = assign_for_booking(department, request.requested_date, time_slot, registry)

        appointment = Appointment(
            appointment_id=RecordId.generate("a").value,
            user_id=request.user_id,
            patient_name=request.patient_name,
            department=department,
            requested_date=request.requested_date,
            time_slot=time_slot,
            status=RequestStatus.PENDING,
            assigned_doctor_id=doctor.doctor_id if doctor else None,
        )
        saved = await self._appointment_repository.save(appointment)

        if doctor is None:
            logger.info(
                "Appointment %s stored unassigned: no %s doctor on %s %s",
                saved.appointment_id,
                department,
                saved.weekday.value,
                time_slot.value,
            )
        else:
            logger.info(
                "Appointment %s auto-assigned to %s", saved.appointment_id, doctor.doctor_id
            )
        return BookAppointmentResponse(appointment=saved, assigned_doctor=doctor)
