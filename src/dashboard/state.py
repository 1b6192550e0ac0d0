"""
Dashboard state container.

DashboardState is immutable. The only way to change what the dashboard shows
is to dispatch an action to a DashboardStore, which runs the pure reduce()
function and replaces its state with the result.
"""
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple, Union

THEMES = ("light", "dark", "system")


@dataclass(frozen=True)
class ClassroomCard:
    """What a dashboard card needs to know about a classroom."""
    code: str
    title: str
    subject: str
    sub_code: str
    cover: Optional[str] = None


@dataclass(frozen=True)
class DashboardState:
    classrooms: Tuple[ClassroomCard, ...] = ()
    theme: str = "light"
    theme_dialog_open: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.classrooms


# ================== ACTIONS ==================

@dataclass(frozen=True)
class ClassroomsLoaded:
    classrooms: Tuple[ClassroomCard, ...]


@dataclass(frozen=True)
class ClassroomAdded:
    classroom: ClassroomCard


@dataclass(frozen=True)
class ClassroomRemoved:
    code: str


@dataclass(frozen=True)
class ThemeDialogOpened:
    pass


@dataclass(frozen=True)
class ThemeDialogClosed:
    pass


@dataclass(frozen=True)
class ThemeSelected:
    theme: str


Action = Union[
    ClassroomsLoaded,
    ClassroomAdded,
    ClassroomRemoved,
    ThemeDialogOpened,
    ThemeDialogClosed,
    ThemeSelected,
]


def reduce(state: DashboardState, action: Action) -> DashboardState:
    """Returns the next state; never mutates `state`."""
    if isinstance(action, ClassroomsLoaded):
        return replace(state, classrooms=tuple(action.classrooms))

    if isinstance(action, ClassroomAdded):
        if any(c.code == action.classroom.code for c in state.classrooms):
            return state
        return replace(state, classrooms=state.classrooms + (action.classroom,))

    if isinstance(action, ClassroomRemoved):
        return replace(
            state,
            classrooms=tuple(c for c in state.classrooms if c.code != action.code)
        )

    if isinstance(action, ThemeDialogOpened):
        return replace(state, theme_dialog_open=True)

    if isinstance(action, ThemeDialogClosed):
        return replace(state, theme_dialog_open=False)

    if isinstance(action, ThemeSelected):
        if action.theme not in THEMES:
            raise ValueError(f"Unknown theme: {action.theme}")
        # Picking a theme also closes the dialog
        return replace(state, theme=action.theme, theme_dialog_open=False)

    raise TypeError(f"Unknown dashboard action: {type(action).__name__}")


Listener = Callable[[DashboardState], None]


@dataclass
class DashboardStore:
    """Single source of truth for one dashboard render."""
    state: DashboardState = field(default_factory=DashboardState)
    _listeners: List[Listener] = field(default_factory=list, repr=False)

    def dispatch(self, action: Action) -> DashboardState:
        new_state = reduce(self.state, action)
        if new_state != self.state:
            self.state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self.state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
