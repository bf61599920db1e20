#!/usr/bin/env python3
"""
Demo data generator for CareConnect.

Wipes the users, doctors, appointments and queries collections and refills
them with the default accounts, the default doctor roster and a batch of
generated patients, appointments and symptom queries.

Usage:
    python scripts/seed_database.py
    python scripts/seed_database.py --count 50
    python scripts/seed_database.py --no-clear
"""

import argparse
import asyncio
import random
import sys
from datetime import date, datetime, timedelta

# Add the src directory to the Python path
sys.path.insert(0, 'src')

from careconnect.adapters.db.mongo.models import (
    AppointmentMongo,
    DoctorMongo,
    HealthQueryMongo,
    UserMongo,
)
from careconnect.adapters.db.mongo.repositories.appointment_repository import MongoAppointmentRepository
from careconnect.adapters.db.mongo.repositories.doctor_repository import MongoDoctorRepository
from careconnect.adapters.db.mongo.repositories.query_repository import MongoHealthQueryRepository
from careconnect.adapters.db.mongo.repositories.user_repository import MongoUserRepository
from careconnect.app import init_database
from careconnect.application.triage import classify
from careconnect.application.use_cases.ensure_defaults import EnsureDefaultRecordsUseCase
from careconnect.core.config import get_settings
from careconnect.core.constants import DEFAULT_DOCTORS, DEPARTMENT_OPTIONS
from careconnect.core.utils.crypto_utils import hash_password
from careconnect.domain.entities import Appointment, HealthQuery, User
from careconnect.domain.enums.workflow import RequestStatus, TimeSlot, UserRole

DEMO_CATEGORIES = [
    "Emergency",
    "General Consultation",
    "Pediatrician",
    "Cardiologist",
    "Dermatologist",
    "Orthopedic",
]
GENDERS = ["Male", "Female", "Other"]
SYMPTOMS = [
    "Severe chest pain and shortness of breath",
    "Mild headache and slightly elevated temperature",
    "Fever and rash on arms",
    "Severe allergic reaction, face swelling",
    "Irregular heartbeat during exercise",
    "Severe acne breakout and skin redness",
    "Persistent cough for 3 weeks",
    "Sharp pain in lower back",
    "Blurry vision in left eye",
    "Nausea and dizziness after eating",
]
# Share of generated emergencies at the head of the query batch
EMERGENCY_SHARE = 0.15


class DemoDataSeeder:
    """Fill a CareConnect database with demo records."""

    def __init__(self, count: int, seed: int = None):
        self.count = count
        self.rng = random.Random(seed)
        self.users = MongoUserRepository()
        self.doctors = MongoDoctorRepository()
        self.appointments = MongoAppointmentRepository()
        self.queries = MongoHealthQueryRepository()

    async def clear(self) -> None:
        print("🧹 Clearing existing collections...")
        await asyncio.gather(
            UserMongo.delete_all(),
            DoctorMongo.delete_all(),
            AppointmentMongo.delete_all(),
            HealthQueryMongo.delete_all(),
        )

    async def seed_users(self) -> int:
        users_created, _ = await EnsureDefaultRecordsUseCase(self.users, self.doctors).execute()
        for i in range(self.count):
            email = f"patient{i + 1}@hospital.com"
            if await self.users.find_by_email(email) is not None:
                continue
            await self.users.save(
                User(
                    user_id=f"pat_gen_{i}",
                    name=f"Test Patient {i + 1}",
                    email=email,
                    phone=f"1234567{i:03d}",
                    password_hash=hash_password("Test@123"),
                    role=UserRole.PATIENT,
                )
            )
            users_created += 1
        return users_created

    async def seed_appointments(self) -> int:
        doctor_ids = [record["doctor_id"] for record in DEFAULT_DOCTORS]
        statuses = list(RequestStatus)
        today = date.today()
        for i in range(self.count):
            offset = self.rng.randint(0, 13) * self.rng.choice([-1, 1])
            await self.appointments.save(
                Appointment(
                    appointment_id=f"a_gen_{i}",
                    user_id=f"pat_gen_{i}",
                    patient_name=f"Test Patient {i + 1}",
                    department=self.rng.choice(DEPARTMENT_OPTIONS),
                    requested_date=today + timedelta(days=offset),
                    time_slot=self.rng.choice(list(TimeSlot)),
                    status=self.rng.choice(statuses),
                    assigned_doctor_id=self.rng.choice(doctor_ids),
                )
            )
        return self.count

    async def seed_queries(self) -> int:
        now = datetime.utcnow()
        emergencies = int(self.count * EMERGENCY_SHARE)
        for i in range(self.count):
            symptoms = self.rng.choice(SYMPTOMS)
            assessment = classify(symptoms)
            await self.queries.save(
                HealthQuery(
                    query_id=f"q_gen_{i}",
                    user_id=f"pat_gen_{i}",
                    patient_name=f"Test Patient {i + 1}",
                    age=self.rng.randint(18, 77),
                    gender=self.rng.choice(GENDERS),
                    category="Emergency" if i < emergencies else self.rng.choice(DEMO_CATEGORIES),
                    symptoms=symptoms,
                    status=RequestStatus.APPROVED if i % 4 == 0 else RequestStatus.PENDING,
                    advisory_text=assessment.advisory_text,
                    advisory_kind=assessment.advisory_kind,
                    urgency=assessment.urgency,
                    created_at=now - timedelta(seconds=self.rng.randint(0, 7 * 24 * 3600)),
                )
            )
        return self.count


async def main(args: argparse.Namespace) -> None:
    settings = get_settings()
    print(f"🔌 Connecting to {settings.database.db_name}...")
    await init_database(settings)

    seeder = DemoDataSeeder(args.count, seed=args.seed)
    if not args.no_clear:
        await seeder.clear()

    print("🌱 Generating demo data...")
    users = await seeder.seed_users()
    appointments = await seeder.seed_appointments()
    queries = await seeder.seed_queries()
    doctors = await seeder.doctors.count()

    print("✅ Seeding completed")
    print(f"   users created:        {users}")
    print(f"   doctors in registry:  {doctors}")
    print(f"   appointments created: {appointments}")
    print(f"   queries created:      {queries}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed CareConnect with demo data")
    parser.add_argument("--no-clear", action="store_true", help="Keep existing records")
    parser.add_argument("--count", type=int, default=100, help="Generated patients, appointments and queries")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = parser.parse_args()

    try:
        asyncio.run(main(args))
    except KeyboardInterrupt:
        sys.exit(1)
