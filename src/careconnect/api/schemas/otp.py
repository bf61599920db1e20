"""
Request bodies for the phone OTP flow. Field names follow the web client.
"""

from typing import Optional

from pydantic import BaseModel


class SendOtpRequestSchema(BaseModel):
    phoneNumber: Optional[str] = None


class VerifyOtpRequestSchema(BaseModel):
    phoneNumber: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None
