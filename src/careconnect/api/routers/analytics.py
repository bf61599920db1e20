"""
Dashboard analytics endpoint.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query, Request

from ...application.use_cases.dashboard_analytics import GetDashboardAnalyticsUseCase
from ..deps import AdminUserDep, AppointmentRepositoryDep, DoctorRepositoryDep, QueryRepositoryDep
from ..schemas.analytics import AnalyticsSummarySchema
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=ApiResponse[AnalyticsSummarySchema])
async def analytics_summary(
    http_request: Request,
    admin: AdminUserDep,
    query_repo: QueryRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
    doctor_repo: DoctorRepositoryDep,
    today: Optional[date] = Query(None, description="Reference day (defaults to today)"),
):
    summary = await GetDashboardAnalyticsUseCase(query_repo, appointment_repo, doctor_repo).execute(today)
    return ok(http_request, data=AnalyticsSummarySchema.from_dto(summary))
