"""
Value objects package for domain layer.
"""

from .record_id import RecordId

__all__ = ["RecordId"]
