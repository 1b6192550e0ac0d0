# Dashboard module
from src.dashboard.state import (
    THEMES,
    ClassroomCard,
    DashboardState,
    DashboardStore,
    ClassroomsLoaded,
    ClassroomAdded,
    ClassroomRemoved,
    ThemeDialogOpened,
    ThemeDialogClosed,
    ThemeSelected,
    reduce,
)
from src.dashboard.view import render_dashboard, to_card, to_cards

__all__ = [
    "THEMES",
    "ClassroomCard",
    "DashboardState",
    "DashboardStore",
    "ClassroomsLoaded",
    "ClassroomAdded",
    "ClassroomRemoved",
    "ThemeDialogOpened",
    "ThemeDialogClosed",
    "ThemeSelected",
    "reduce",
    "render_dashboard",
    "to_card",
    "to_cards",
]
