"""
Cryptographic utility functions for CareConnect application.
"""

import hashlib
import secrets


def hash_password(password: str) -> str:
    """Hash password using SHA-256."""
    return hashlib.sha256(password.encode()).hexdigest()


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return secrets.compare_digest(hash_password(password), hashed_password)
