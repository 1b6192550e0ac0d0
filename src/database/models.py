"""
Classroom Hub - Veritabanı Modelleri
SQLAlchemy ORM models for users, classrooms and memberships
"""
from sqlalchemy import (
    Column, String, Integer, ForeignKey, DateTime, Boolean, JSON, UniqueConstraint
)
from sqlalchemy.orm import relationship, declarative_base
from datetime import datetime

Base = declarative_base()


# ================== KULLANICI ==================

class User(Base):
    """Kullanıcı modeli - Firebase Authentication ile"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    firebase_uid = Column(String(128), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=True)  # Telefon/anonim girişte e-posta yok
    full_name = Column(String(100), nullable=False)
    avatar_url = Column(String(512), nullable=True)

    # Durum
    is_active = Column(Boolean, default=True)
    is_verified = Column(Boolean, default=False)  # Firebase email_verified ile senkronize

    # Tercihler (JSON) - e.g. {"theme": "dark"}
    preferences = Column(JSON, default=dict)

    # Zaman damgaları
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_login = Column(DateTime, nullable=True)

    # İlişkiler
    authored_classrooms = relationship("Classroom", back_populates="author")
    memberships = relationship("ClassroomMember", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.email or self.firebase_uid}>"


# ================== SINIF ==================

class Classroom(Base):
    """Sınıf - katılım kodu ile paylaşılır"""
    __tablename__ = "classrooms"

    id = Column(Integer, primary_key=True)
    code = Column(String(16), unique=True, index=True, nullable=False)

    # Görüntüleme bilgileri
    title = Column(String(200), nullable=False)
    subject = Column(String(100), nullable=False)
    sub_code = Column(String(50), nullable=False)
    cover = Column(String(512), nullable=True)

    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Zaman damgaları
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # İlişkiler
    author = relationship("User", back_populates="authored_classrooms")
    members = relationship(
        "ClassroomMember",
        back_populates="classroom",
        cascade="all, delete-orphan",
        order_by="ClassroomMember.id"
    )

    @property
    def joined_user_ids(self) -> list:
        """Member ids in join order."""
        return [m.user_id for m in self.members]

    def has_member(self, user_id: int) -> bool:
        return any(m.user_id == user_id for m in self.members)

    def __repr__(self):
        return f"<Classroom {self.code}: {self.title}>"


class ClassroomMember(Base):
    """Sınıf üyeliği - bir kullanıcı bir sınıfta en fazla bir kez"""
    __tablename__ = "classroom_members"
    __table_args__ = (
        UniqueConstraint("classroom_id", "user_id", name="uq_classroom_member"),
    )

    id = Column(Integer, primary_key=True)
    classroom_id = Column(Integer, ForeignKey("classrooms.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    joined_at = Column(DateTime, default=datetime.utcnow)

    classroom = relationship("Classroom", back_populates="members")
    user = relationship("User", back_populates="memberships")

    def __repr__(self):
        return f"<ClassroomMember {self.classroom_id}:{self.user_id}>"
