"""
OTP service interface for phone verification.
"""

from abc import ABC, abstractmethod


class OtpService(ABC):
    """Abstract service for sending and checking one-time passcodes.

    Implementations raise ``OTPServiceError`` when the provider fails.
    """

    @abstractmethod
    async def send_code(self, phone_number: str) -> str:
        """Start a verification and return the provider status (e.g. "pending")."""
        pass

    @abstractmethod
    async def check_code(self, phone_number: str, code: str) -> str:
        """Check a code and return the provider status ("approved" on success)."""
        pass
