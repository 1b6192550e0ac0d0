"""
Classroom API Routes
Sınıf yaşam döngüsü ve üyelik API'leri.
"""
from fastapi import APIRouter

from api.routes.classrooms.classroom import router as classroom_router
from api.routes.classrooms.members import router as members_router

router = APIRouter(prefix="/api/classroom")

# Paths do not overlap (POST /{code} is join, the rest differ by method or depth)
router.include_router(classroom_router)
router.include_router(members_router)
