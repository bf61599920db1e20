"""
Account endpoints: signup, login and the current user.
"""

from fastapi import APIRouter, Request, status

from ...application.dto.auth_dto import LoginRequest, SignupRequest
from ...application.use_cases.auth import LoginUseCase, SignupUseCase
from ...application.use_cases.list_requests import ListPatientRequestsUseCase
from ..deps import (
    AppointmentRepositoryDep,
    CurrentUserDep,
    QueryRepositoryDep,
    UserRepositoryDep,
)
from ..schemas.auth import LoginRequestSchema, SignupRequestSchema, UserSchema
from ..schemas.common import ApiResponse, ErrorResponse
from ..schemas.requests import AppointmentSchema, PatientRequestsSchema, QuerySchema
from ..utils.responses import fail, ok

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=ApiResponse[UserSchema],
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
async def signup(http_request: Request, request: SignupRequestSchema, user_repo: UserRepositoryDep):
    """Create an account (role defaults to Patient). The new user is signed in."""
    result = await SignupUseCase(user_repo).execute(
        SignupRequest(
            name=request.name,
            email=request.email,
            password=request.password,
            phone=request.phone,
            role=request.role,
        )
    )
    if not result.success:
        return fail(
            http_request,
            error="EMAIL_ALREADY_REGISTERED",
            message=result.message,
            status_code=status.HTTP_409_CONFLICT,
        )
    return ok(http_request, data=UserSchema.from_entity(result.user), message="Created")


@router.post(
    "/login",
    response_model=ApiResponse[UserSchema],
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(http_request: Request, request: LoginRequestSchema, user_repo: UserRepositoryDep):
    result = await LoginUseCase(user_repo).execute(
        LoginRequest(email=request.email, password=request.password)
    )
    if not result.success:
        return fail(
            http_request,
            error="INVALID_CREDENTIALS",
            message=result.message,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return ok(http_request, data=UserSchema.from_entity(result.user), message="OK")


@router.get("/me", response_model=ApiResponse[UserSchema])
async def me(http_request: Request, user: CurrentUserDep):
    return ok(http_request, data=UserSchema.from_entity(user))


@router.get("/me/requests", response_model=ApiResponse[PatientRequestsSchema])
async def my_requests(
    http_request: Request,
    user: CurrentUserDep,
    query_repo: QueryRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
):
    """The signed-in user's own queries and appointments, for the status page."""
    requests = await ListPatientRequestsUseCase(query_repo, appointment_repo).execute(user.user_id)
    return ok(
        http_request,
        data=PatientRequestsSchema(
            queries=[QuerySchema.from_entity(q) for q in requests.queries],
            appointments=[AppointmentSchema.from_entity(a) for a in requests.appointments],
        ),
    )
