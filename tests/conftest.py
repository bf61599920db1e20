"""
Shared fixtures: in-memory repositories behind the application ports and a
TestClient whose dependency providers point at them.
"""

import copy
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from careconnect.app import app
from careconnect.api import deps
from careconnect.application.ports.repositories.appointment_repo import AppointmentRepository
from careconnect.application.ports.repositories.doctor_repo import DoctorRepository
from careconnect.application.ports.repositories.phone_booking_repo import PhoneBookingRepository
from careconnect.application.ports.repositories.query_repo import HealthQueryRepository
from careconnect.application.ports.repositories.user_repo import UserRepository
from careconnect.application.ports.services.otp_service import OtpService
from careconnect.core.constants import DEFAULT_DOCTORS, DEFAULT_USERS
from careconnect.core.exceptions import OTPServiceError
from careconnect.core.utils.crypto_utils import hash_password
from careconnect.domain.entities import Appointment, Doctor, HealthQuery, PhoneBooking, User

ADMIN = {"X-User-ID": "admin_1"}
DOCTOR = {"X-User-ID": "doc_1"}
PATIENT = {"X-User-ID": "pat_1"}


class InMemoryDoctorRepository(DoctorRepository):
    def __init__(self, doctors: Optional[List[Doctor]] = None):
        # Registration order is list order
        self._doctors: List[Doctor] = [copy.deepcopy(d) for d in doctors or []]

    async def save(self, doctor: Doctor) -> Doctor:
        for i, stored in enumerate(self._doctors):
            if stored.doctor_id == doctor.doctor_id:
                self._doctors[i] = copy.deepcopy(doctor)
                return copy.deepcopy(doctor)
        self._doctors.append(copy.deepcopy(doctor))
        return copy.deepcopy(doctor)

    async def find_by_id(self, doctor_id: str) -> Optional[Doctor]:
        for doctor in self._doctors:
            if doctor.doctor_id == doctor_id:
                return copy.deepcopy(doctor)
        return None

    async def find_all(self) -> List[Doctor]:
        return copy.deepcopy(self._doctors)

    async def find_by_email_or_name(self, email, name) -> Optional[Doctor]:
        if email:
            for doctor in self._doctors:
                if doctor.email and doctor.email.lower() == email.lower():
                    return copy.deepcopy(doctor)
        if name:
            for doctor in self._doctors:
                if doctor.name == name:
                    return copy.deepcopy(doctor)
        return None

    async def count(self) -> int:
        return len(self._doctors)


class InMemoryQueryRepository(HealthQueryRepository):
    def __init__(self):
        self._queries: Dict[str, HealthQuery] = {}

    async def save(self, query: HealthQuery) -> HealthQuery:
        self._queries[query.query_id] = copy.deepcopy(query)
        return copy.deepcopy(query)

    async def find_by_id(self, query_id: str) -> Optional[HealthQuery]:
        query = self._queries.get(query_id)
        return copy.deepcopy(query) if query else None

    async def find_all(self, category: Optional[str] = None) -> List[HealthQuery]:
        queries = [q for q in self._queries.values() if category is None or q.category == category]
        return copy.deepcopy(sorted(queries, key=lambda q: q.created_at, reverse=True))

    async def find_by_user(self, user_id: str) -> List[HealthQuery]:
        return [q for q in await self.find_all() if q.user_id == user_id]


class InMemoryAppointmentRepository(AppointmentRepository):
    def __init__(self):
        self._appointments: Dict[str, Appointment] = {}

    async def save(self, appointment: Appointment) -> Appointment:
        self._appointments[appointment.appointment_id] = copy.deepcopy(appointment)
        return copy.deepcopy(appointment)

    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        appointment = self._appointments.get(appointment_id)
        return copy.deepcopy(appointment) if appointment else None

    async def find_all(self) -> List[Appointment]:
        return copy.deepcopy(
            sorted(self._appointments.values(), key=lambda a: a.created_at, reverse=True)
        )

    async def find_by_user(self, user_id: str) -> List[Appointment]:
        return [a for a in await self.find_all() if a.user_id == user_id]

    async def find_by_doctor(self, doctor_id: str) -> List[Appointment]:
        return [a for a in await self.find_all() if a.assigned_doctor_id == doctor_id]


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Optional[List[User]] = None):
        self._users: Dict[str, User] = {u.user_id: copy.deepcopy(u) for u in users or []}

    async def save(self, user: User) -> User:
        self._users[user.user_id] = copy.deepcopy(user)
        return copy.deepcopy(user)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user else None

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == (email or "").lower():
                return copy.deepcopy(user)
        return None


class InMemoryPhoneBookingRepository(PhoneBookingRepository):
    def __init__(self):
        self.bookings: List[PhoneBooking] = []

    async def save(self, booking: PhoneBooking) -> PhoneBooking:
        stored = copy.deepcopy(booking)
        stored.booking_id = f"pb_{len(self.bookings) + 1}"
        self.bookings.append(stored)
        return copy.deepcopy(stored)


class FakeOtpService(OtpService):
    """Records calls; ``fail_with`` makes every call raise OTPServiceError."""

    def __init__(self, send_status: str = "pending", check_status: str = "approved"):
        self.send_status = send_status
        self.check_status = check_status
        self.fail_with: Optional[str] = None
        self.sent: List[str] = []
        self.checked: List[tuple] = []

    async def send_code(self, phone_number: str) -> str:
        if self.fail_with:
            raise OTPServiceError(self.fail_with)
        self.sent.append(phone_number)
        return self.send_status

    async def check_code(self, phone_number: str, code: str) -> str:
        if self.fail_with:
            raise OTPServiceError(self.fail_with)
        self.checked.append((phone_number, code))
        return self.check_status


def default_doctors() -> List[Doctor]:
    return [Doctor(**record) for record in DEFAULT_DOCTORS]


def default_users() -> List[User]:
    return [
        User(
            user_id=record["user_id"],
            name=record["name"],
            email=record["email"],
            phone=record["phone"],
            password_hash=hash_password(record["password"]),
            role=record["role"],
        )
        for record in DEFAULT_USERS
    ]


@pytest.fixture
def registry() -> List[Doctor]:
    """The default roster in registration order."""
    return default_doctors()


@pytest.fixture
def doctor_repo() -> InMemoryDoctorRepository:
    return InMemoryDoctorRepository(default_doctors())


@pytest.fixture
def query_repo() -> InMemoryQueryRepository:
    return InMemoryQueryRepository()


@pytest.fixture
def appointment_repo() -> InMemoryAppointmentRepository:
    return InMemoryAppointmentRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(default_users())


@pytest.fixture
def booking_repo() -> InMemoryPhoneBookingRepository:
    return InMemoryPhoneBookingRepository()


@pytest.fixture
def otp_service() -> FakeOtpService:
    return FakeOtpService()


@pytest.fixture
def client(doctor_repo, query_repo, appointment_repo, user_repo, booking_repo, otp_service):
    """TestClient wired to the in-memory repositories (no database, no lifespan)."""
    app.dependency_overrides[deps.get_doctor_repository] = lambda: doctor_repo
    app.dependency_overrides[deps.get_query_repository] = lambda: query_repo
    app.dependency_overrides[deps.get_appointment_repository] = lambda: appointment_repo
    app.dependency_overrides[deps.get_user_repository] = lambda: user_repo
    app.dependency_overrides[deps.get_phone_booking_repository] = lambda: booking_repo
    app.dependency_overrides[deps.get_otp_service] = lambda: otp_service
    yield TestClient(app)
    app.dependency_overrides.clear()
