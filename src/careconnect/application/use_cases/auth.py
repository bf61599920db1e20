"""Account signup and login."""

import logging

from ...core.utils.crypto_utils import hash_password, verify_password
from ...domain.entities.user import User
from ...domain.enums.workflow import UserRole
from ...domain.errors import InvalidUserDataError
from ...domain.value_objects.record_id import RecordId
from ..dto.auth_dto import AuthResult, LoginRequest, SignupRequest
from ..ports.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already registered."
INVALID_CREDENTIALS = "Invalid email or password."


class SignupUseCase:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, request: SignupRequest) -> AuthResult:
        if not request.password:
            raise InvalidUserDataError("password", "Password is required")
        try:
            role = UserRole(request.role) if request.role else UserRole.PATIENT
        except ValueError:
            raise InvalidUserDataError("role", f"Unknown role '{request.role}'") from None

        email = (request.email or "").strip().lower()
        if await self._user_repository.find_by_email(email) is not None:
            return AuthResult(success=False, message=EMAIL_TAKEN)

        user = User(
            user_id=RecordId.generate("u").value,
            name=(request.name or "").strip(),
            email=email,
            phone=request.phone or None,
            password_hash=hash_password(request.password),
            role=role,
        )
        saved = await self._user_repository.save(user)
        logger.info("User %s signed up as %s", saved.user_id, saved.role.value)
        return AuthResult(success=True, user=saved)


class LoginUseCase:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, request: LoginRequest) -> AuthResult:
        user = await self._user_repository.find_by_email((request.email or "").strip().lower())
        if user is None or not verify_password(request.password or "", user.password_hash):
            logger.info("Failed login attempt")
            return AuthResult(success=False, message=INVALID_CREDENTIALS)
        return AuthResult(success=True, user=user)
