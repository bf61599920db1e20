"""
Record identifier value object shared by queries, appointments, doctors and users.
Format: <prefix>_<12 hex chars>
"""

import re
import uuid
from dataclasses import dataclass

_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]{0,99}$")


@dataclass(frozen=True)
class RecordId:
    """Immutable record identifier value object."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Record ID cannot be empty")
        if not _PATTERN.match(self.value):
            raise ValueError(
                "Record ID may only contain letters, digits, '_' or '-' (max 100 characters)"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, prefix: str) -> "RecordId":
        """Generate a new identifier such as ``q_3f9a1c2b7d4e``."""
        return cls(f"{prefix}_{uuid.uuid4().hex[:12]}")
