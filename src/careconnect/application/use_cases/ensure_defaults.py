"""Startup bootstrap of default accounts and the doctor roster."""

import logging
from typing import Tuple

from ...core.constants import DEFAULT_DOCTORS, DEFAULT_USERS
from ...core.utils.crypto_utils import hash_password
from ...domain.entities.doctor import Doctor
from ...domain.entities.user import User
from ..ports.repositories.doctor_repo import DoctorRepository
from ..ports.repositories.user_repo import UserRepository

logger = logging.getLogger("careconnect")


class EnsureDefaultRecordsUseCase:
    """Create each default account whose email is unknown, and the default
    roster when the registry is empty. Existing data is never touched."""

    def __init__(self, user_repository: UserRepository, doctor_repository: DoctorRepository):
        self._user_repository = user_repository
        self._doctor_repository = doctor_repository

    async def execute(self) -> Tuple[int, int]:
        users_created = 0
        for record in DEFAULT_USERS:
            if await self._user_repository.find_by_email(record["email"]) is not None:
                continue
            await self._user_repository.save(
                User(
                    user_id=record["user_id"],
                    name=record["name"],
                    email=record["email"],
                    phone=record["phone"],
                    password_hash=hash_password(record["password"]),
                    role=record["role"],
                )
            )
            users_created += 1

        doctors_created = 0
        if await self._doctor_repository.count() == 0:
            for record in DEFAULT_DOCTORS:
                await self._doctor_repository.save(Doctor(**record))
                doctors_created += 1

        if users_created or doctors_created:
            logger.info(
                "Bootstrapped %d default accounts and %d doctors", users_created, doctors_created
            )
        return users_created, doctors_created
