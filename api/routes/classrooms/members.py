"""
Classroom Membership Routes
Katılım kodu ile katılma, üye listeleme ve üye çıkarma.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from api.auth.deps import get_current_active_user, get_classroom_service
from api.limiter import limiter
from api.models import ClassroomResponse, MemberResponse, MessageResponse
from config.settings import get_settings
from src.classroom.service import ClassroomService
from src.database.models import User

logger = logging.getLogger("api.classrooms.members")

router = APIRouter(tags=["Classroom Members"])


@router.post("/{code}", response_model=ClassroomResponse)
@limiter.limit(get_settings().join_rate_limit)
async def join_classroom(
    request: Request,
    code: str,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Katılım kodu ile sınıfa katılır.
    Zaten üye olan kullanıcılar için çakışma hatası döner.
    Kod tahminini zorlaştırmak için rate limit uygulanır.
    """
    classroom = service.join(code, current_user)
    return ClassroomResponse.from_model(classroom)


@router.get("/{code}/users", response_model=List[MemberResponse])
async def list_members(
    code: str,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """Sınıf üyelerini katılma sırasıyla listeler. Sadece üyeler."""
    members = service.list_members(code, current_user)
    return [MemberResponse.from_model(user) for user in members]


@router.delete("/{code}/{user_id}", response_model=MessageResponse)
async def remove_member(
    code: str,
    user_id: int,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Bir üyeyi sınıftan çıkarır.
    Sınıfın author'ı olmak gerekir.
    """
    service.remove_member(code, current_user, user_id)
    return MessageResponse(msg="User removed.")
