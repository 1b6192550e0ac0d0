"""
Classroom domain exceptions.

Every error a caller can cause derives from ClassroomError and carries the
message returned to the client. Lookups that fail because the classroom does
not exist and lookups that fail because the caller is not a member raise the
same ClassroomNotFoundError.
"""


class ClassroomError(Exception):
    """Base exception for classroom operations."""

    message = "Classroom operation failed."

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ClassroomNotFoundError(ClassroomError):
    """Raised when a classroom does not exist or the caller is not a member."""

    message = "Class does not exist."

    def __init__(self, code: str = None):
        self.code = code
        super().__init__()


class AlreadyMemberError(ClassroomError):
    """Raised when the caller tries to join a classroom they are in."""

    message = "You have already joined this class."


class NotAuthorizedError(ClassroomError):
    """Raised when a member attempts an author-only operation."""

    message = "User not authorized."


class MemberNotFoundError(ClassroomError):
    """Raised when removing a user who is not a member."""

    message = "User is not a member of this class."


class AuthorRemovalError(ClassroomError):
    message = "The author cannot be removed from the class."


class JoinCodeExhaustedError(Exception):
    """Raised when no free join code was found within the attempt budget.

    Not a ClassroomError: it is a server-side failure, not something the
    caller can fix.
    """
