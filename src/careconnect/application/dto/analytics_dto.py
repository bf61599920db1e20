"""Dashboard analytics DTOs."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List


@dataclass
class NamedCount:
    name: str
    count: int


@dataclass
class DateCount:
    date: date
    count: int


@dataclass
class DashboardAnalytics:
    total_queries: int
    emergency_cases: int
    total_doctors: int
    doctors_on_duty_today: int
    appointments_today: int
    category_distribution: List[NamedCount] = field(default_factory=list)
    urgency_distribution: Dict[str, int] = field(default_factory=dict)
    appointments_by_department: List[NamedCount] = field(default_factory=list)
    appointments_trend: List[DateCount] = field(default_factory=list)
