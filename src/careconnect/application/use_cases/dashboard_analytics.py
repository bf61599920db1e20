"""Totals and chart series for the admin dashboard."""

from collections import Counter
from datetime import date
from typing import Optional, Sequence

from ...core.constants import (
    EMERGENCY_CATEGORY,
    GENERAL_CATEGORY,
    SPECIALIST_CATEGORY,
    SPECIALIST_CATEGORY_KEYWORDS,
    TOP_DEPARTMENTS_LIMIT,
)
from ...domain.entities.appointment import Appointment
from ...domain.entities.doctor import Doctor
from ...domain.entities.health_query import HealthQuery
from ...domain.enums.workflow import UrgencyTier, Weekday
from ..dto.analytics_dto import DashboardAnalytics, DateCount, NamedCount
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.doctor_repo import DoctorRepository
from ..ports.repositories.query_repo import HealthQueryRepository

CATEGORY_BUCKETS = ("Emergency", "General", "Specialist", "Other")


def category_bucket(category: str) -> str:
    if category == EMERGENCY_CATEGORY:
        return "Emergency"
    if category == GENERAL_CATEGORY:
        return "General"
    if category == SPECIALIST_CATEGORY or any(
        keyword in category for keyword in SPECIALIST_CATEGORY_KEYWORDS
    ):
        return "Specialist"
    return "Other"


def compute_dashboard_analytics(
    queries: Sequence[HealthQuery],
    appointments: Sequence[Appointment],
    doctors: Sequence[Doctor],
    today: date,
) -> DashboardAnalytics:
    weekday = Weekday.from_date(today)

    appointments_today = sum(1 for a in appointments if a.requested_date == today)
    if appointments_today == 0:
        # The dashboard shows the overall count rather than an empty tile
        appointments_today = len(appointments)

    buckets = Counter(category_bucket(q.category or "") for q in queries)
    urgency = Counter(q.urgency for q in queries)

    departments = Counter(
        (a.department.split(" ")[0] if a.department else "") for a in appointments
    )
    by_department = sorted(departments.items(), key=lambda item: item[1], reverse=True)

    per_date = Counter(a.requested_date for a in appointments)

    return DashboardAnalytics(
        total_queries=len(queries),
        emergency_cases=sum(1 for q in queries if q.category == EMERGENCY_CATEGORY),
        total_doctors=len(doctors),
        doctors_on_duty_today=sum(1 for d in doctors if d.is_active and d.works_on(weekday)),
        appointments_today=appointments_today,
        category_distribution=[
            NamedCount(name=bucket, count=buckets[bucket])
            for bucket in CATEGORY_BUCKETS
            if buckets[bucket] > 0
        ],
        urgency_distribution={tier.value: urgency.get(tier, 0) for tier in UrgencyTier},
        appointments_by_department=[
            NamedCount(name=name, count=count)
            for name, count in by_department[:TOP_DEPARTMENTS_LIMIT]
        ],
        appointments_trend=[
            DateCount(date=day, count=per_date[day]) for day in sorted(per_date)
        ],
    )


class GetDashboardAnalyticsUseCase:
    def __init__(
        self,
        query_repository: HealthQueryRepository,
        appointment_repository: AppointmentRepository,
        doctor_repository: DoctorRepository,
    ):
        self._query_repository = query_repository
        self._appointment_repository = appointment_repository
        self._doctor_repository = doctor_repository

    async def execute(self, today: Optional[date] = None) -> DashboardAnalytics:
        queries = await self._query_repository.find_all()
        appointments = await self._appointment_repository.find_all()
        doctors = await self._doctor_repository.find_all()
        return compute_dashboard_analytics(
            queries, appointments, doctors, today or date.today()
        )
