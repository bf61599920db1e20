"""Account DTOs."""

from dataclasses import dataclass
from typing import Optional

from ...domain.entities.user import User


@dataclass
class SignupRequest:
    name: str
    email: str
    password: str
    phone: Optional[str] = None
    role: Optional[str] = None


@dataclass
class LoginRequest:
    email: str
    password: str


@dataclass
class AuthResult:
    """Outcome of signup/login. Failures are reported here, not raised."""

    success: bool
    message: Optional[str] = None
    user: Optional[User] = None
