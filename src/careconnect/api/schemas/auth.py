"""
Schemas for account signup and login.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.entities.user import User

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SignupRequestSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1)
    phone: Optional[str] = Field(None, max_length=20)
    role: Optional[str] = Field(None, description="Admin / Doctor / Patient (default Patient)")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        s = (v or "").strip().lower()
        if not _EMAIL.match(s):
            raise ValueError("Invalid email address")
        return s


class LoginRequestSchema(BaseModel):
    email: str
    password: str


class UserSchema(BaseModel):
    user_id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserSchema":
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
            created_at=user.created_at,
        )
