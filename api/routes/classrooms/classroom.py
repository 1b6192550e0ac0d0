"""
Classroom CRUD Routes
Sınıf oluşturma, listeleme, görüntüleme, düzenleme ve silme/ayrılma.

Domain errors raised by ClassroomService are turned into responses by the
handlers registered in api.main.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from api.auth.deps import get_current_active_user, get_classroom_service
from api.models import (
    ClassroomCreateRequest,
    ClassroomUpdateRequest,
    ClassroomResponse,
    MessageResponse,
)
from src.classroom.service import ClassroomService, RemovalOutcome
from src.database.models import User

logger = logging.getLogger("api.classrooms")

router = APIRouter(tags=["Classrooms"])

REMOVAL_MESSAGES = {
    RemovalOutcome.DELETED: "Class deleted successfully.",
    RemovalOutcome.LEFT: "Class left successfully.",
}


@router.get("/", response_model=List[ClassroomResponse])
async def list_classrooms(
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Kullanıcının üye olduğu sınıfları listeler.
    Hiç sınıf yoksa boş liste döner.
    """
    classrooms = service.list_for_user(current_user)
    return [ClassroomResponse.from_model(c) for c in classrooms]


@router.post("/", response_model=ClassroomResponse)
async def create_classroom(
    request: ClassroomCreateRequest,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Yeni sınıf oluşturur.
    Oluşturan kullanıcı author ve ilk üye olur.
    """
    classroom = service.create(
        current_user,
        title=request.title,
        subject=request.subject,
        sub_code=request.sub_code,
        cover=request.cover,
    )
    return ClassroomResponse.from_model(classroom)


@router.get("/{code}", response_model=ClassroomResponse)
async def get_classroom(
    code: str,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Katılım koduyla sınıfı getirir.
    Sadece üyeler görebilir; diğerleri için sınıf yokmuş gibi davranılır.
    """
    return ClassroomResponse.from_model(service.get_for_member(code, current_user))


@router.patch("/{code}", response_model=ClassroomResponse)
async def update_classroom(
    code: str,
    request: ClassroomUpdateRequest,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Sınıf bilgilerini günceller.
    Sınıfın author'ı olmak gerekir.
    """
    classroom = service.update(
        code,
        current_user,
        title=request.title,
        subject=request.subject,
        sub_code=request.sub_code,
        cover=request.cover,
    )
    return ClassroomResponse.from_model(classroom)


@router.delete("/{code}", response_model=MessageResponse)
async def delete_or_leave_classroom(
    code: str,
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Author için sınıfı kalıcı olarak siler (hard delete).
    Diğer üyeler için sınıftan ayrılma işlemidir; sınıf korunur.
    """
    outcome = service.delete_or_leave(code, current_user)
    return MessageResponse(msg=REMOVAL_MESSAGES[outcome])
