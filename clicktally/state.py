"""Structures de données partagées entre la couche UI et le contrôleur."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViewState(str, Enum):
    """Écran actuellement affiché."""

    LOGGED_OUT = "logged_out"
    WELCOME = "welcome"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    SUMMARY = "summary"


@dataclass(frozen=True, slots=True)
class Session:
    """Identité authentifiée pour la durée du processus."""

    username: str


@dataclass(slots=True)
class CounterState:
    """Compteur unique partagé par toutes les vues."""

    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value

    def decrement(self) -> int:
        # Pas de plancher : le compteur peut devenir négatif.
        self.value -= 1
        return self.value


@dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Projection en lecture seule de l'état, consommée par le rendu."""

    view: ViewState
    username: str | None = None
    count: int | None = None


@dataclass(slots=True)
class AppState:
    """État interne de l'application."""

    session: Session | None = None
    counter: CounterState | None = None
    view: ViewState = ViewState.LOGGED_OUT

    @property
    def is_authenticated(self) -> bool:
        """Retourne True si l'utilisateur est authentifié."""
        return self.session is not None

    def start_session(self, session: Session) -> None:
        """Ouvre la session et crée un compteur à zéro."""
        self.session = session
        self.counter = CounterState()
        self.view = ViewState.WELCOME

    def snapshot(self) -> ViewSnapshot:
        if self.session is None or self.counter is None:
            return ViewSnapshot(view=self.view)
        return ViewSnapshot(
            view=self.view,
            username=self.session.username,
            count=self.counter.value,
        )
