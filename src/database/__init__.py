# Database module
from src.database.models import (
    Base,
    User,
    Classroom,
    ClassroomMember,
)
from src.database.db import (
    engine,
    SessionLocal,
    init_db,
    get_db,
    get_db_context,
)

__all__ = [
    # Models
    "Base",
    "User",
    "Classroom",
    "ClassroomMember",
    # Database
    "engine",
    "SessionLocal",
    "init_db",
    "get_db",
    "get_db_context",
]
