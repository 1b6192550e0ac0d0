"""
Dashboard HTML rendering.

Renders a DashboardState with the Jinja2 template shipped next to this
module. The view only reads state; toggles are links that the route turns
into actions.
"""
from functools import lru_cache
from pathlib import Path
from typing import Iterable

import jinja2

from src.dashboard.state import THEMES, ClassroomCard, DashboardState
from src.database.models import Classroom

TEMPLATE_DIR = Path(__file__).parent / "templates"
DASHBOARD_TEMPLATE = "dashboard.html.jinja2"

EMPTY_TITLE = "No classes here!"
EMPTY_SUBTITLE = "Create a new class or join class."


@lru_cache()
def get_environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=jinja2.select_autoescape(["html", "jinja2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def to_card(classroom: Classroom) -> ClassroomCard:
    return ClassroomCard(
        code=classroom.code,
        title=classroom.title,
        subject=classroom.subject,
        sub_code=classroom.sub_code,
        cover=classroom.cover,
    )


def to_cards(classrooms: Iterable[Classroom]) -> tuple:
    return tuple(to_card(c) for c in classrooms)


def render_dashboard(state: DashboardState, base_path: str = "/dashboard") -> str:
    """Renders the full dashboard page for `state`."""
    template = get_environment().get_template(DASHBOARD_TEMPLATE)
    return template.render(
        state=state,
        themes=THEMES,
        base_path=base_path,
        empty_title=EMPTY_TITLE,
        empty_subtitle=EMPTY_SUBTITLE,
    )
