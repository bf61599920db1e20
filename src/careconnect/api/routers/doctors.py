"""
Doctor registry endpoints.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from ...application.dto.doctor_dto import (
    AddDoctorRequest,
    DoctorProfileRequest,
    DoctorSearchRequest,
)
from ...application.use_cases.manage_doctors import (
    AddDoctorUseCase,
    ListDoctorsUseCase,
    SearchDoctorsUseCase,
    UpdateDoctorStatusUseCase,
    UpsertDoctorProfileUseCase,
)
from ...core.constants import ALL_DEPARTMENTS
from ..deps import AdminUserDep, DoctorRepositoryDep, DoctorUserDep, StaffUserDep
from ..schemas.common import ApiResponse, ErrorResponse
from ..schemas.doctors import (
    AddDoctorRequestSchema,
    DoctorProfileRequestSchema,
    DoctorSchema,
    DoctorStatusSchema,
)
from ..utils.responses import ok

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.get("/", response_model=ApiResponse[List[DoctorSchema]])
async def list_doctors(http_request: Request, doctor_repo: DoctorRepositoryDep):
    """The whole registry in registration order."""
    doctors = await ListDoctorsUseCase(doctor_repo).execute()
    return ok(http_request, data=[DoctorSchema.from_entity(d) for d in doctors])


@router.post(
    "/",
    response_model=ApiResponse[DoctorSchema],
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse, "description": "Missing name, days or slots"}},
)
async def add_doctor(
    http_request: Request,
    request: AddDoctorRequestSchema,
    admin: AdminUserDep,
    doctor_repo: DoctorRepositoryDep,
):
    doctor = await AddDoctorUseCase(doctor_repo).execute(
        AddDoctorRequest(
            name=request.name,
            department=request.department,
            experience=request.experience,
            email=request.email,
            available_days=request.available_days,
            time_slots=request.time_slots,
        )
    )
    return ok(http_request, data=DoctorSchema.from_entity(doctor), message="Created")


@router.get("/search", response_model=ApiResponse[List[DoctorSchema]])
async def search_doctors(
    http_request: Request,
    admin: AdminUserDep,
    doctor_repo: DoctorRepositoryDep,
    day: str = Query(..., description="Weekday name, e.g. Monday"),
    department: str = Query(ALL_DEPARTMENTS, description="Exact department label or 'All Departments'"),
):
    doctors = await SearchDoctorsUseCase(doctor_repo).execute(
        DoctorSearchRequest(department=department, day=day)
    )
    return ok(http_request, data=[DoctorSchema.from_entity(d) for d in doctors])


@router.get("/on-duty", response_model=ApiResponse[List[DoctorSchema]])
async def doctors_on_duty(
    http_request: Request,
    staff: StaffUserDep,
    doctor_repo: DoctorRepositoryDep,
    on: Optional[date] = Query(None, description="Date to check (defaults to today)"),
):
    doctors = await ListDoctorsUseCase(doctor_repo).execute(on_duty=on or date.today())
    return ok(http_request, data=[DoctorSchema.from_entity(d) for d in doctors])


@router.put("/me", response_model=ApiResponse[DoctorSchema])
async def upsert_my_profile(
    http_request: Request,
    request: DoctorProfileRequestSchema,
    doctor_user: DoctorUserDep,
    doctor_repo: DoctorRepositoryDep,
):
    """Create or update the signed-in doctor's availability profile."""
    doctor, created = await UpsertDoctorProfileUseCase(doctor_repo).execute(
        doctor_user,
        DoctorProfileRequest(
            department=request.department,
            experience=request.experience,
            available_days=request.available_days,
            time_slots=request.time_slots,
            status=request.status,
        ),
    )
    return ok(
        http_request,
        data=DoctorSchema.from_entity(doctor),
        message="Created" if created else "Updated",
    )


@router.patch(
    "/{doctor_id}/status",
    response_model=ApiResponse[DoctorSchema],
    responses={404: {"model": ErrorResponse, "description": "Doctor not found"}},
)
async def update_doctor_status(
    http_request: Request,
    doctor_id: str,
    request: DoctorStatusSchema,
    admin: AdminUserDep,
    doctor_repo: DoctorRepositoryDep,
):
    doctor = await UpdateDoctorStatusUseCase(doctor_repo).execute(doctor_id, request.status)
    return ok(http_request, data=DoctorSchema.from_entity(doctor), message="Updated")
