"""MongoDB Beanie model for OTP-verified phone bookings."""

from datetime import datetime

from beanie import Document
from pydantic import Field


class PhoneBookingMongo(Document):
    name: str = Field(...)
    phone: str = Field(...)
    status: str = Field(default="Pending")
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "phone_bookings"
        indexes = ["created_at"]
