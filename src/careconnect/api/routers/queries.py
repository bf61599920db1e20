"""
Health query endpoints: submission with triage guidance and admin review.
"""

import logging
from typing import List

from fastapi import APIRouter, Query, Request, status

from ...application.dto.request_dto import SubmitQueryRequest
from ...application.use_cases.list_requests import ListQueriesUseCase
from ...application.use_cases.submit_query import SubmitQueryUseCase
from ...application.use_cases.update_request_status import UpdateQueryStatusUseCase
from ..deps import AdminUserDep, CurrentUserDep, DoctorRepositoryDep, QueryRepositoryDep
from ..schemas.common import ApiResponse, ErrorResponse
from ..schemas.requests import (
    QuerySchema,
    StatusUpdateSchema,
    SubmitQueryRequestSchema,
    SubmitQueryResponseSchema,
)
from ..utils.responses import ok

router = APIRouter(prefix="/queries", tags=["queries"])
logger = logging.getLogger("careconnect")


@router.post(
    "/",
    response_model=ApiResponse[SubmitQueryResponseSchema],
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Not signed in"},
        422: {"model": ErrorResponse, "description": "Missing age or symptoms"},
    },
)
async def submit_query(
    http_request: Request,
    request: SubmitQueryRequestSchema,
    user: CurrentUserDep,
    query_repo: QueryRepositoryDep,
    doctor_repo: DoctorRepositoryDep,
):
    """
    Submit symptoms for review.

    The response carries the advisory text and, when one could be matched,
    the suggested doctor. The query is stored as Pending.
    """
    result = await SubmitQueryUseCase(query_repo, doctor_repo).execute(
        SubmitQueryRequest(
            user_id=user.user_id,
            patient_name=request.patient_name or user.name,
            age=request.age,
            symptoms=request.symptoms or "",
            gender=request.gender,
            category=request.category,
        )
    )
    return ok(
        http_request,
        data=SubmitQueryResponseSchema(
            query=QuerySchema.from_entity(result.query),
            suggested_doctor_name=result.guidance.suggested_doctor_name,
        ),
        message="Created",
    )


@router.get("/", response_model=ApiResponse[List[QuerySchema]])
async def list_queries(
    http_request: Request,
    admin: AdminUserDep,
    query_repo: QueryRepositoryDep,
    emergency_only: bool = Query(False, description="Only queries in the Emergency category"),
):
    queries = await ListQueriesUseCase(query_repo).execute(emergency_only=emergency_only)
    return ok(http_request, data=[QuerySchema.from_entity(q) for q in queries])


@router.get("/mine", response_model=ApiResponse[List[QuerySchema]])
async def my_queries(http_request: Request, user: CurrentUserDep, query_repo: QueryRepositoryDep):
    queries = await query_repo.find_by_user(user.user_id)
    return ok(http_request, data=[QuerySchema.from_entity(q) for q in queries])


@router.patch(
    "/{query_id}/status",
    response_model=ApiResponse[QuerySchema],
    responses={
        404: {"model": ErrorResponse, "description": "Query not found"},
        409: {"model": ErrorResponse, "description": "Transition not allowed"},
    },
)
async def update_query_status(
    http_request: Request,
    query_id: str,
    request: StatusUpdateSchema,
    admin: AdminUserDep,
    query_repo: QueryRepositoryDep,
):
    query = await UpdateQueryStatusUseCase(query_repo).execute(query_id, request.status)
    logger.info(f"Admin {admin.user_id} set query {query_id} to {query.status.value}")
    return ok(http_request, data=QuerySchema.from_entity(query), message="Updated")
