# Classroom domain module
from src.classroom.exceptions import (
    ClassroomError,
    ClassroomNotFoundError,
    AlreadyMemberError,
    NotAuthorizedError,
    MemberNotFoundError,
    AuthorRemovalError,
    JoinCodeExhaustedError,
)
from src.classroom.join_code import (
    JOIN_CODE_ALPHABET,
    generate_join_code,
    generate_unique_join_code,
    is_valid_join_code,
)
from src.classroom.service import ClassroomService, RemovalOutcome

__all__ = [
    # Exceptions
    "ClassroomError",
    "ClassroomNotFoundError",
    "AlreadyMemberError",
    "NotAuthorizedError",
    "MemberNotFoundError",
    "AuthorRemovalError",
    "JoinCodeExhaustedError",
    # Join codes
    "JOIN_CODE_ALPHABET",
    "generate_join_code",
    "generate_unique_join_code",
    "is_valid_join_code",
    # Service
    "ClassroomService",
    "RemovalOutcome",
]
