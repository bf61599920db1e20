"""MongoDB Beanie model for user accounts."""

from datetime import datetime
from typing import Optional

from beanie import Document
from pydantic import Field


class UserMongo(Document):
    user_id: str = Field(..., description="User ID", unique=True)
    name: str = Field(...)
    email: str = Field(..., description="Lowercased login email", unique=True)
    phone: Optional[str] = Field(None)
    password_hash: str = Field(..., description="SHA-256 password hash")
    role: str = Field(default="Patient", description="Admin / Doctor / Patient")
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"
        indexes = [
            "user_id",
            "email",
        ]
