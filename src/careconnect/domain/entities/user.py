"""User account entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums.workflow import UserRole
from ..errors import InvalidUserDataError


@dataclass
class User:
    """User domain entity. Passwords are only ever held hashed."""

    user_id: str
    name: str
    email: str
    password_hash: str
    role: UserRole = UserRole.PATIENT
    phone: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.role = UserRole(self.role)
        if not self.name or not self.name.strip():
            raise InvalidUserDataError("name", "Name is required")
        if not self.email or "@" not in self.email:
            raise InvalidUserDataError("email", "A valid email is required")
        self.email = self.email.strip().lower()
        if not self.password_hash:
            raise InvalidUserDataError("password", "Password is required")

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles
