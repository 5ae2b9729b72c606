"""Projection pure d'un instantané vers la description d'un écran.

Aucune dépendance à Tkinter : ce module décrit les widgets (libellés,
champs, boutons), leurs identifiants de test et l'intention que chaque
bouton transmet au contrôleur. ``MainWindow`` se contente de dessiner le
résultat.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from clicktally.intents import (
    Intent,
    PressBack,
    PressDecrement,
    PressIncrement,
    PressNav,
)
from clicktally.state import ViewSnapshot, ViewState

USERNAME_INPUT_ID = "username-input"
PASSWORD_INPUT_ID = "password-input"
SUBMIT_BUTTON_ID = "button"

INCREMENT_LABEL = "Increment"
DECREMENT_LABEL = "Decrement"
SUMMARY_LABEL = "Summary"
BACK_LABEL = "Back to Welcome"


class WidgetKind(str, Enum):
    TITLE = "title"
    TEXT = "text"
    INPUT = "input"
    BUTTON = "button"


@dataclass(frozen=True, slots=True)
class Widget:
    kind: WidgetKind
    text: str = ""
    test_id: str | None = None
    intent: Intent | None = None
    secret: bool = False


@dataclass(frozen=True, slots=True)
class Screen:
    """Écran prêt à être rendu."""

    view: ViewState
    widgets: tuple[Widget, ...]

    def texts(self) -> list[str]:
        return [widget.text for widget in self.widgets if widget.kind is not WidgetKind.INPUT]

    def buttons(self) -> list[Widget]:
        return [widget for widget in self.widgets if widget.kind is WidgetKind.BUTTON]

    def button(self, label: str) -> Widget:
        """Retourne le bouton portant ``label`` ou lève ``LookupError``."""
        for widget in self.buttons():
            if widget.text == label:
                return widget
        raise LookupError(f"Aucun bouton « {label} » sur l'écran {self.view.value}.")

    def by_test_id(self, test_id: str) -> Widget:
        for widget in self.widgets:
            if widget.test_id == test_id:
                return widget
        raise LookupError(f"Aucun widget « {test_id} » sur l'écran {self.view.value}.")


def _button(label: str, intent: Intent, test_id: str | None = None) -> Widget:
    return Widget(kind=WidgetKind.BUTTON, text=label, test_id=test_id, intent=intent)


def _login_screen() -> tuple[Widget, ...]:
    # Le bouton de connexion n'a pas d'intention fixe : l'UI construit
    # SubmitLogin à partir du contenu des deux champs.
    return (
        Widget(kind=WidgetKind.TITLE, text="Login"),
        Widget(kind=WidgetKind.INPUT, text="Username", test_id=USERNAME_INPUT_ID),
        Widget(kind=WidgetKind.INPUT, text="Password", test_id=PASSWORD_INPUT_ID, secret=True),
        Widget(kind=WidgetKind.BUTTON, text="Login", test_id=SUBMIT_BUTTON_ID),
    )


def build_screen(snapshot: ViewSnapshot) -> Screen:
    """Construit l'écran correspondant à ``snapshot``."""
    view = snapshot.view
    username = snapshot.username or ""
    count = snapshot.count if snapshot.count is not None else 0

    if view is ViewState.WELCOME:
        widgets = (
            Widget(kind=WidgetKind.TITLE, text=f"Welcome, {username}!"),
            Widget(kind=WidgetKind.TEXT, text=f"Click Count: {count}"),
            _button(INCREMENT_LABEL, PressIncrement()),
            _button(DECREMENT_LABEL, PressDecrement()),
            _button(SUMMARY_LABEL, PressNav.summary()),
        )
    elif view is ViewState.INCREMENT:
        widgets = (
            Widget(kind=WidgetKind.TEXT, text=f"Count: {count}"),
            _button(INCREMENT_LABEL, PressIncrement()),
            _button(BACK_LABEL, PressBack()),
        )
    elif view is ViewState.DECREMENT:
        widgets = (
            Widget(kind=WidgetKind.TEXT, text=f"Count: {count}"),
            _button(DECREMENT_LABEL, PressDecrement()),
            _button(BACK_LABEL, PressBack()),
        )
    elif view is ViewState.SUMMARY:
        widgets = (
            Widget(kind=WidgetKind.TITLE, text=SUMMARY_LABEL),
            Widget(kind=WidgetKind.TEXT, text=f"Username: {username}"),
            Widget(kind=WidgetKind.TEXT, text=f"Clicks: {count}"),
            _button(BACK_LABEL, PressBack()),
        )
    else:
        widgets = _login_screen()

    return Screen(view=view, widgets=widgets)
