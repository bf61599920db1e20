import datetime as dt
from typing import Dict, List

from pydantic import BaseModel

from ...application.dto.analytics_dto import DashboardAnalytics


class NamedCountSchema(BaseModel):
    name: str
    count: int


class DateCountSchema(BaseModel):
    date: dt.date
    count: int


class AnalyticsSummarySchema(BaseModel):
    total_queries: int
    emergency_cases: int
    total_doctors: int
    doctors_on_duty_today: int
    appointments_today: int
    category_distribution: List[NamedCountSchema]
    urgency_distribution: Dict[str, int]
    appointments_by_department: List[NamedCountSchema]
    appointments_trend: List[DateCountSchema]

    @classmethod
    def from_dto(cls, summary: DashboardAnalytics) -> "AnalyticsSummarySchema":
        return cls(
            total_queries=summary.total_queries,
            emergency_cases=summary.emergency_cases,
            total_doctors=summary.total_doctors,
            doctors_on_duty_today=summary.doctors_on_duty_today,
            appointments_today=summary.appointments_today,
            category_distribution=[
                NamedCountSchema(name=c.name, count=c.count) for c in summary.category_distribution
            ],
            urgency_distribution=summary.urgency_distribution,
            appointments_by_department=[
                NamedCountSchema(name=c.name, count=c.count)
                for c in summary.appointments_by_department
            ],
            appointments_trend=[
                DateCountSchema(date=p.date, count=p.count) for p in summary.appointments_trend
            ],
        )
