"""
Appointment endpoints: booking with auto-assignment and admin management.
"""

import logging
from typing import List

from fastapi import APIRouter, Request, status

from ...application.dto.request_dto import BookAppointmentRequest
from ...application.use_cases.book_appointment import BookAppointmentUseCase
from ...application.use_cases.list_requests import (
    ListAppointmentsUseCase,
    ListDoctorAppointmentsUseCase,
)
from ...application.use_cases.update_request_status import (
    AssignAppointmentDoctorUseCase,
    UpdateAppointmentStatusUseCase,
)
from ..deps import (
    AdminUserDep,
    AppointmentRepositoryDep,
    CurrentUserDep,
    DoctorRepositoryDep,
    DoctorUserDep,
)
from ..schemas.common import ApiResponse, ErrorResponse
from ..schemas.requests import (
    AppointmentSchema,
    AssignDoctorSchema,
    BookAppointmentRequestSchema,
    BookAppointmentResponseSchema,
    StatusUpdateSchema,
)
from ..utils.responses import ok

router = APIRouter(prefix="/appointments", tags=["appointments"])
logger = logging.getLogger("careconnect")


@router.post(
    "/",
    response_model=ApiResponse[BookAppointmentResponseSchema],
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse, "description": "Missing date or unknown time slot"}},
)
async def book_appointment(
    http_request: Request,
    request: BookAppointmentRequestSchema,
    user: CurrentUserDep,
    appointment_repo: AppointmentRepositoryDep,
    doctor_repo: DoctorRepositoryDep,
):
    """
    Book an appointment.

    The first Active doctor in the requested department who works that
    weekday in that slot is assigned. Otherwise the booking is stored
    unassigned for an administrator to handle.
    """
    result = await BookAppointmentUseCase(appointment_repo, doctor_repo).execute(
        BookAppointmentRequest(
            user_id=user.user_id,
            patient_name=request.patient_name or user.name,
            requested_date=request.requested_date,
            department=request.department,
            time_slot=request.time_slot,
        )
    )
    doctor = result.assigned_doctor
    return ok(
        http_request,
        data=BookAppointmentResponseSchema(
            appointment=AppointmentSchema.from_entity(result.appointment),
            assigned_doctor_name=doctor.name if doctor else None,
        ),
        message="Created",
    )


@router.get("/", response_model=ApiResponse[List[AppointmentSchema]])
async def list_appointments(
    http_request: Request, admin: AdminUserDep, appointment_repo: AppointmentRepositoryDep
):
    appointments = await ListAppointmentsUseCase(appointment_repo).execute()
    return ok(http_request, data=[AppointmentSchema.from_entity(a) for a in appointments])


@router.get("/mine", response_model=ApiResponse[List[AppointmentSchema]])
async def my_appointments(
    http_request: Request, user: CurrentUserDep, appointment_repo: AppointmentRepositoryDep
):
    appointments = await appointment_repo.find_by_user(user.user_id)
    return ok(http_request, data=[AppointmentSchema.from_entity(a) for a in appointments])


@router.get("/assigned", response_model=ApiResponse[List[AppointmentSchema]])
async def assigned_to_me(
    http_request: Request,
    doctor_user: DoctorUserDep,
    appointment_repo: AppointmentRepositoryDep,
    doctor_repo: DoctorRepositoryDep,
):
    """Appointments assigned to the signed-in doctor's profile."""
    appointments = await ListDoctorAppointmentsUseCase(doctor_repo, appointment_repo).execute(doctor_user)
    return ok(http_request, data=[AppointmentSchema.from_entity(a) for a in appointments])


@router.patch(
    "/{appointment_id}/status",
    response_model=ApiResponse[AppointmentSchema],
    responses={
        404: {"model": ErrorResponse, "description": "Appointment not found"},
        409: {"model": ErrorResponse, "description": "Transition not allowed"},
    },
)
async def update_appointment_status(
    http_request: Request,
    appointment_id: str,
    request: StatusUpdateSchema,
    admin: AdminUserDep,
    appointment_repo: AppointmentRepositoryDep,
):
    appointment = await UpdateAppointmentStatusUseCase(appointment_repo).execute(
        appointment_id, request.status
    )
    logger.info(f"Admin {admin.user_id} set appointment {appointment_id} to {appointment.status.value}")
    return ok(http_request, data=AppointmentSchema.from_entity(appointment), message="Updated")


@router.patch(
    "/{appointment_id}/doctor",
    response_model=ApiResponse[AppointmentSchema],
    responses={404: {"model": ErrorResponse, "description": "Appointment or doctor not found"}},
)
async def assign_doctor(
    http_request: Request,
    appointment_id: str,
    request: AssignDoctorSchema,
    admin: AdminUserDep,
    appointment_repo: AppointmentRepositoryDep,
    doctor_repo: DoctorRepositoryDep,
):
    appointment = await AssignAppointmentDoctorUseCase(appointment_repo, doctor_repo).execute(
        appointment_id, request.doctor_id
    )
    return ok(http_request, data=AppointmentSchema.from_entity(appointment), message="Updated")
