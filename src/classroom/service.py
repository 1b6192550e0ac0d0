"""
Classroom Service
Sınıf yaşam döngüsü ve üyelik işlemleri.

All reads are scoped to the caller's membership except the join lookup,
which by definition runs before the caller is a member.
"""
import enum
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import get_settings
from src.classroom.exceptions import (
    AlreadyMemberError,
    AuthorRemovalError,
    ClassroomNotFoundError,
    MemberNotFoundError,
    NotAuthorizedError,
)
from src.classroom.join_code import generate_unique_join_code, is_valid_join_code
from src.database.models import Classroom, ClassroomMember, User

logger = logging.getLogger("classroom.service")


class RemovalOutcome(str, enum.Enum):
    """Result of a delete request on a classroom."""
    DELETED = "deleted"
    LEFT = "left"


class ClassroomService:
    """Classroom CRUD and membership operations for a single request."""

    def __init__(self, db: Session):
        self.db = db

    # ================== QUERIES ==================

    def _find_by_code(self, code: str) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.code == code).first()

    def _code_exists(self, code: str) -> bool:
        return self.db.query(Classroom.id).filter(Classroom.code == code).first() is not None

    def list_for_user(self, user: User) -> List[Classroom]:
        """Caller'ın üye olduğu sınıflar (boş liste geçerli bir sonuçtur)."""
        return (
            self.db.query(Classroom)
            .join(ClassroomMember, ClassroomMember.classroom_id == Classroom.id)
            .filter(ClassroomMember.user_id == user.id)
            .order_by(ClassroomMember.id)
            .all()
        )

    def get_for_member(self, code: str, user: User) -> Classroom:
        """
        Sınıfı yalnızca caller üye ise döndürür.

        A classroom the caller is not a member of is reported exactly like a
        missing one.
        """
        classroom = (
            self.db.query(Classroom)
            .join(ClassroomMember, ClassroomMember.classroom_id == Classroom.id)
            .filter(Classroom.code == code, ClassroomMember.user_id == user.id)
            .first()
        )
        if not classroom:
            raise ClassroomNotFoundError(code)
        return classroom

    def _get_for_author(self, code: str, user: User) -> Classroom:
        classroom = self.get_for_member(code, user)
        if classroom.author_id != user.id:
            raise NotAuthorizedError()
        return classroom

    def list_members(self, code: str, user: User) -> List[User]:
        classroom = self.get_for_member(code, user)
        return [member.user for member in classroom.members]

    # ================== MUTATIONS ==================

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("Classroom transaction failed, rolled back")
            raise

    def create(
        self,
        user: User,
        title: str,
        subject: str,
        sub_code: str,
        cover: Optional[str] = None
    ) -> Classroom:
        """Yeni sınıf oluşturur; author otomatik olarak ilk üyedir."""
        settings = get_settings()
        code = generate_unique_join_code(
            self._code_exists,
            length=settings.join_code_length,
            max_attempts=settings.join_code_max_attempts
        )

        classroom = Classroom(
            code=code,
            title=title,
            subject=subject,
            sub_code=sub_code,
            cover=cover,
            author_id=user.id,
        )
        classroom.members.append(ClassroomMember(user_id=user.id))

        self.db.add(classroom)
        self._commit()
        self.db.refresh(classroom)

        logger.info(f"Classroom created: {classroom.code} by user {user.id}")
        return classroom

    def join(self, code: str, user: User) -> Classroom:
        # Malformed codes cannot exist; answer them without a lookup
        if not is_valid_join_code(code, get_settings().join_code_length):
            raise ClassroomNotFoundError(code)

        classroom = self._find_by_code(code)
        if not classroom:
            raise ClassroomNotFoundError(code)

        if classroom.has_member(user.id):
            raise AlreadyMemberError()

        classroom.members.append(ClassroomMember(user_id=user.id))
        self._commit()
        self.db.refresh(classroom)

        logger.info(f"User {user.id} joined classroom {code}")
        return classroom

    def update(
        self,
        code: str,
        user: User,
        title: str,
        subject: str,
        sub_code: str,
        cover: Optional[str] = None
    ) -> Classroom:
        """Sınıf bilgilerini günceller. Sadece author."""
        classroom = self._get_for_author(code, user)

        classroom.title = title
        classroom.subject = subject
        classroom.sub_code = sub_code
        if cover is not None:
            classroom.cover = cover

        self._commit()
        self.db.refresh(classroom)

        logger.info(f"Classroom updated: {code}")
        return classroom

    def delete_or_leave(self, code: str, user: User) -> RemovalOutcome:
        """
        Author için sınıfı siler, diğer üyeler için sınıftan ayrılır.
        """
        classroom = self.get_for_member(code, user)

        if classroom.author_id == user.id:
            self.db.delete(classroom)
            self._commit()
            logger.info(f"Classroom deleted: {code}")
            return RemovalOutcome.DELETED

        self._remove_membership(classroom, user.id)
        self._commit()
        logger.info(f"User {user.id} left classroom {code}")
        return RemovalOutcome.LEFT

    def remove_member(self, code: str, user: User, target_user_id: int) -> Classroom:
        classroom = self._get_for_author(code, user)

        if target_user_id == classroom.author_id:
            raise AuthorRemovalError()
        if not classroom.has_member(target_user_id):
            raise MemberNotFoundError()

        self._remove_membership(classroom, target_user_id)
        self._commit()
        self.db.refresh(classroom)

        logger.info(f"User {target_user_id} removed from classroom {code} by {user.id}")
        return classroom

    @staticmethod
    def _remove_membership(classroom: Classroom, user_id: int) -> None:
        # delete-orphan cascade turns the collection removal into a DELETE
        for member in list(classroom.members):
            if member.user_id == user_id:
                classroom.members.remove(member)
