# API module
from api.models import (
    ClassroomCreateRequest,
    ClassroomUpdateRequest,
    ClassroomResponse,
    MemberResponse,
    MessageResponse,
    HealthResponse,
)
from api.main import app

__all__ = [
    "app",
    "ClassroomCreateRequest",
    "ClassroomUpdateRequest",
    "ClassroomResponse",
    "MemberResponse",
    "MessageResponse",
    "HealthResponse",
]
