# API Routes
from api.routes.classrooms import router as classrooms_router
from api.routes.dashboard import router as dashboard_router

__all__ = [
    "classrooms_router",
    "dashboard_router",
]
