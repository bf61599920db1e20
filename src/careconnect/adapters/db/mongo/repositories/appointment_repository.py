"""
MongoDB implementation of AppointmentRepository.
"""

from datetime import datetime, time
from typing import List, Optional

from careconnect.application.ports.repositories.appointment_repo import AppointmentRepository
from careconnect.domain.entities.appointment import Appointment
from careconnect.domain.enums.workflow import RequestStatus, TimeSlot

from ..models.appointment_m import AppointmentMongo


class MongoAppointmentRepository(AppointmentRepository):
    """MongoDB implementation of AppointmentRepository."""

    async def save(self, appointment: Appointment) -> Appointment:
        appointment_mongo = await self._domain_to_mongo(appointment)
        await appointment_mongo.save()
        return self._mongo_to_domain(appointment_mongo)

    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        appointment_mongo = await AppointmentMongo.find_one(
            AppointmentMongo.appointment_id == appointment_id
        )
        if not appointment_mongo:
            return None
        return self._mongo_to_domain(appointment_mongo)

    async def find_all(self) -> List[Appointment]:
        appointments_mongo = await AppointmentMongo.find().sort([("created_at", -1)]).to_list()
        return [self._mongo_to_domain(a) for a in appointments_mongo]

    async def find_by_user(self, user_id: str) -> List[Appointment]:
        appointments_mongo = (
            await AppointmentMongo.find(AppointmentMongo.user_id == user_id)
            .sort([("created_at", -1)])
            .to_list()
        )
        return [self._mongo_to_domain(a) for a in appointments_mongo]

    async def find_by_doctor(self, doctor_id: str) -> List[Appointment]:
        appointments_mongo = (
            await AppointmentMongo.find(AppointmentMongo.assigned_doctor_id == doctor_id)
            .sort([("requested_date", 1)])
            .to_list()
        )
        return [self._mongo_to_domain(a) for a in appointments_mongo]

    async def _domain_to_mongo(self, appointment: Appointment) -> AppointmentMongo:
        """Convert domain entity to MongoDB model."""
        existing = await AppointmentMongo.find_one(
            AppointmentMongo.appointment_id == appointment.appointment_id
        )
        if existing:
            existing.status = appointment.status.value
            existing.assigned_doctor_id = appointment.assigned_doctor_id
            return existing

        return AppointmentMongo(
            appointment_id=appointment.appointment_id,
            user_id=appointment.user_id,
            patient_name=appointment.patient_name,
            department=appointment.department,
            requested_date=datetime.combine(appointment.requested_date, time.min),
            time_slot=appointment.time_slot.value,
            status=appointment.status.value,
            assigned_doctor_id=appointment.assigned_doctor_id,
            created_at=appointment.created_at,
        )

    def _mongo_to_domain(self, appointment_mongo: AppointmentMongo) -> Appointment:
        """Convert MongoDB model to domain entity."""
        try:
            time_slot = TimeSlot(appointment_mongo.time_slot)
        except ValueError:
            time_slot = TimeSlot.MORNING
        return Appointment(
            appointment_id=appointment_mongo.appointment_id,
            user_id=appointment_mongo.user_id,
            patient_name=appointment_mongo.patient_name,
            department=appointment_mongo.department,
            requested_date=appointment_mongo.requested_date.date(),
            time_slot=time_slot,
            status=RequestStatus.from_stored(appointment_mongo.status),
            assigned_doctor_id=appointment_mongo.assigned_doctor_id,
            created_at=appointment_mongo.created_at,
        )
