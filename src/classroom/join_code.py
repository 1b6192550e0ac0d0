"""
Join code generation.
"""
import secrets
import string
from typing import Callable

from src.classroom.exceptions import JoinCodeExhaustedError

JOIN_CODE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_JOIN_CODE_LENGTH = 6


def generate_join_code(length: int = DEFAULT_JOIN_CODE_LENGTH) -> str:
    """Rastgele katılım kodu oluşturur (a-z, A-Z, 0-9)."""
    return ''.join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(length))


def is_valid_join_code(code: str, length: int = DEFAULT_JOIN_CODE_LENGTH) -> bool:
    return len(code) == length and all(c in JOIN_CODE_ALPHABET for c in code)


def generate_unique_join_code(
    exists: Callable[[str], bool],
    length: int = DEFAULT_JOIN_CODE_LENGTH,
    max_attempts: int = 10
) -> str:
    """
    Returns a code for which exists(code) is False.

    The store also carries a unique index on the code column, so this loop
    only keeps the insert from failing in the common case.
    """
    for _ in range(max_attempts):
        code = generate_join_code(length)
        if not exists(code):
            return code
    raise JoinCodeExhaustedError(
        f"No free join code found after {max_attempts} attempts"
    )
