"""
Authentication utilities for Classroom Hub API
"""
from api.auth.firebase import (
    get_firebase_app,
    verify_firebase_token,
)
from api.auth.deps import (
    get_current_user,
    get_current_active_user,
    get_classroom_service,
)

__all__ = [
    "get_firebase_app",
    "verify_firebase_token",
    "get_current_user",
    "get_current_active_user",
    "get_classroom_service",
]
