"""
Classroom Hub - API Models
Request/Response models shared by the FastAPI endpoints
"""
from pydantic import (
    BaseModel, ConfigDict, Field, AliasChoices, HttpUrl, TypeAdapter, ValidationError, field_validator
)
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict
from datetime import datetime


_cover_url = TypeAdapter(HttpUrl)


# ================== REQUEST MODELS ==================

class ClassroomCreateRequest(BaseModel):
    """Request for creating a classroom"""
    title: str = Field(..., min_length=1, max_length=200)
    subject: str = Field(..., min_length=1, max_length=100)
    sub_code: str = Field(
        ...,
        min_length=1,
        max_length=50,
        validation_alias=AliasChoices("subCode", "subcode", "sub_code")
    )
    cover: Optional[str] = Field(None, max_length=512, description="Cover image URL (http or https)")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Algebra",
                "subject": "Math",
                "subCode": "M101",
                "cover": "https://example.com/covers/algebra.png"
            }
        }
    )

    @field_validator("cover")
    @classmethod
    def cover_must_be_http_url(cls, value: Optional[str]) -> Optional[str]:
        """Kapak resmi sadece http(s) URL olabilir; boş değer kapak yok demektir."""
        if not value:
            return None
        try:
            _cover_url.validate_python(value)
        except ValidationError:
            raise ValueError("cover must be an http(s) URL")
        return value


class ClassroomUpdateRequest(ClassroomCreateRequest):
    """Request for editing classroom metadata; cover is left as is when omitted"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Algebra II",
                "subject": "Math",
                "subcode": "M102"
            }
        }
    )


# ================== RESPONSE MODELS ==================

class ClassroomResponse(BaseModel):
    """Classroom record as seen by members"""
    id: int
    code: str
    title: str
    subject: str
    sub_code: str
    cover: Optional[str] = None
    author: int
    joined_users: List[int]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_model(cls, classroom) -> "ClassroomResponse":
        return cls(
            id=classroom.id,
            code=classroom.code,
            title=classroom.title,
            subject=classroom.subject,
            sub_code=classroom.sub_code,
            cover=classroom.cover,
            author=classroom.author_id,
            joined_users=classroom.joined_user_ids,
            created_at=classroom.created_at,
            updated_at=classroom.updated_at,
        )


class MemberResponse(BaseModel):
    """Public user record - credential fields omitted"""
    id: int
    email: Optional[str] = None
    full_name: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_model(cls, user) -> "MemberResponse":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
        )


class MessageResponse(BaseModel):
    msg: str


class FieldError(BaseModel):
    param: str
    msg: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: List[FieldError]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    services: Dict[str, str]
