"""
Dashboard route - server-rendered list of the caller's classrooms
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from api.auth.deps import get_current_active_user, get_classroom_service
from config.settings import get_settings
from src.classroom.service import ClassroomService
from src.dashboard.state import (
    THEMES,
    DashboardState,
    DashboardStore,
    ClassroomsLoaded,
    ThemeDialogOpened,
    ThemeSelected,
)
from src.dashboard.view import render_dashboard, to_cards
from src.database.models import User

logger = logging.getLogger("api.dashboard")

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_class=HTMLResponse)
async def dashboard(
    dialog: Optional[str] = Query(None, pattern="^theme$"),
    theme: Optional[str] = Query(None, pattern="^(light|dark|system)$"),
    current_user: User = Depends(get_current_active_user),
    service: ClassroomService = Depends(get_classroom_service)
):
    """
    Kullanıcının sınıflarını kart olarak gösterir.

    `?dialog=theme` opens the theme dialog, `?theme=<name>` applies a theme
    (and closes the dialog).
    """
    settings = get_settings()
    preferred = (current_user.preferences or {}).get("theme")
    if preferred not in THEMES:
        preferred = settings.default_theme

    store = DashboardStore(DashboardState(theme=preferred))
    store.dispatch(ClassroomsLoaded(to_cards(service.list_for_user(current_user))))

    if theme:
        store.dispatch(ThemeSelected(theme))
    if dialog == "theme":
        store.dispatch(ThemeDialogOpened())

    return HTMLResponse(render_dashboard(store.state))
