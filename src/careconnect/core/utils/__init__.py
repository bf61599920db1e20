"""
Utility functions for CareConnect application.
"""

from .crypto_utils import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
]
