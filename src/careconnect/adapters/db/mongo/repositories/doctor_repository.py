"""
MongoDB implementation of DoctorRepository.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from careconnect.application.ports.repositories.doctor_repo import DoctorRepository
from careconnect.domain.entities.doctor import Doctor
from careconnect.domain.enums.workflow import DoctorStatus, TimeSlot, Weekday

from ..models.doctor_m import DoctorMongo

logger = logging.getLogger(__name__)

# Registration order: creation time, then insertion id for ties
REGISTRY_ORDER = [("created_at", 1), ("_id", 1)]


def _known_values(values: Iterable[str], enum_cls, doctor_id: str) -> List[str]:
    allowed = {member.value for member in enum_cls}
    kept = []
    for value in values or []:
        if value in allowed:
            kept.append(value)
        else:
            logger.warning("Ignoring unknown %s '%s' on doctor %s", enum_cls.__name__, value, doctor_id)
    return kept


class MongoDoctorRepository(DoctorRepository):
    """MongoDB implementation of DoctorRepository."""

    async def save(self, doctor: Doctor) -> Doctor:
        doctor_mongo = await self._domain_to_mongo(doctor)
        await doctor_mongo.save()
        return self._mongo_to_domain(doctor_mongo)

    async def find_by_id(self, doctor_id: str) -> Optional[Doctor]:
        doctor_mongo = await DoctorMongo.find_one(DoctorMongo.doctor_id == doctor_id)
        if not doctor_mongo:
            return None
        return self._mongo_to_domain(doctor_mongo)

    async def find_all(self) -> List[Doctor]:
        doctors_mongo = await DoctorMongo.find().sort(REGISTRY_ORDER).to_list()
        return [self._mongo_to_domain(d) for d in doctors_mongo]

    async def find_by_email_or_name(
        self, email: Optional[str], name: Optional[str]
    ) -> Optional[Doctor]:
        """Email match wins over name match."""
        doctor_mongo = None
        if email:
            doctor_mongo = await DoctorMongo.find_one(DoctorMongo.email == email.lower())
        if doctor_mongo is None and name:
            doctor_mongo = await DoctorMongo.find_one(DoctorMongo.name == name)
        if doctor_mongo is None:
            return None
        return self._mongo_to_domain(doctor_mongo)

    async def count(self) -> int:
        return await DoctorMongo.find().count()

    async def _domain_to_mongo(self, doctor: Doctor) -> DoctorMongo:
        """Convert domain entity to MongoDB model."""
        existing = await DoctorMongo.find_one(DoctorMongo.doctor_id == doctor.doctor_id)
        days = [d.value for d in doctor.available_days]
        slots = [s.value for s in doctor.time_slots]
        email = doctor.email.lower() if doctor.email else None

        if existing:
            existing.name = doctor.name
            existing.department = doctor.department
            existing.experience = doctor.experience
            existing.email = email
            existing.available_days = days
            existing.time_slots = slots
            existing.status = doctor.status.value
            existing.updated_at = datetime.utcnow()
            return existing

        return DoctorMongo(
            doctor_id=doctor.doctor_id,
            name=doctor.name,
            department=doctor.department,
            experience=doctor.experience,
            email=email,
            available_days=days,
            time_slots=slots,
            status=doctor.status.value,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )

    def _mongo_to_domain(self, doctor_mongo: DoctorMongo) -> Doctor:
        """Convert MongoDB model to domain entity."""
        try:
            status = DoctorStatus(doctor_mongo.status)
        except ValueError:
            status = DoctorStatus.ACTIVE
        return Doctor(
            doctor_id=doctor_mongo.doctor_id,
            name=doctor_mongo.name,
            department=doctor_mongo.department,
            experience=doctor_mongo.experience,
            email=doctor_mongo.email,
            available_days=_known_values(doctor_mongo.available_days, Weekday, doctor_mongo.doctor_id),
            time_slots=_known_values(doctor_mongo.time_slots, TimeSlot, doctor_mongo.doctor_id),
            status=status,
            created_at=doctor_mongo.created_at,
            updated_at=doctor_mongo.updated_at,
        )
