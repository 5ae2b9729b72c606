"""Machine à états de navigation et source unique de l'état partagé."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable

from clicktally.intents import (
    Intent,
    PressBack,
    PressDecrement,
    PressIncrement,
    PressNav,
    SubmitLogin,
)
from clicktally.services import AuthError, AuthGate
from clicktally.state import AppState, ViewSnapshot, ViewState

logger = logging.getLogger(__name__)

Listener = Callable[[ViewSnapshot], None]

_NAV_TARGETS = frozenset({ViewState.INCREMENT, ViewState.DECREMENT, ViewState.SUMMARY})


class NavigationController:
    """Décide de la vue active et possède la session et le compteur.

    ``dispatch`` est synchrone et total : toute intention non prévue pour la
    vue courante est ignorée et renvoie l'instantané inchangé. Les appels
    sont sérialisés par un verrou pour rester cohérents si l'UI délègue du
    travail à un autre thread.

    Une intention émise par un abonné pendant la notification est mise en
    file et appliquée une fois tous les abonnés servis : chacun reçoit donc
    les instantanés dans l'ordre et le dernier reçu est toujours l'état
    courant. L'appel imbriqué retourne l'instantané courant, avant
    application de l'intention mise en file.
    """

    def __init__(self, auth_gate: AuthGate | None = None, state: AppState | None = None) -> None:
        self._auth_gate = auth_gate or AuthGate()
        self._state = state or AppState()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._pending: deque[object] = deque()
        self._notifying = False
        self.last_auth_error: AuthError | None = None

    @property
    def snapshot(self) -> ViewSnapshot:
        with self._lock:
            return self._state.snapshot()

    @property
    def view(self) -> ViewState:
        with self._lock:
            return self._state.view

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Enregistre ``listener`` et retourne la fonction de désabonnement."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, intent: Intent) -> ViewSnapshot:
        """Applique ``intent`` puis notifie les abonnés du nouvel instantané."""
        with self._lock:
            if self._notifying:
                self._pending.append(intent)
                return self._state.snapshot()

            snapshot = self._transition(intent)
            self._notifying = True
            try:
                self._notify(snapshot)
                while self._pending:
                    snapshot = self._transition(self._pending.popleft())
                    self._notify(snapshot)
            finally:
                self._notifying = False
                self._pending.clear()
            return snapshot

    def _transition(self, intent: object) -> ViewSnapshot:
        previous = self._state.view
        self._apply(intent)
        snapshot = self._state.snapshot()
        if snapshot.view is not previous:
            logger.debug("Transition %s -> %s", previous.value, snapshot.view.value)
        return snapshot

    def _notify(self, snapshot: ViewSnapshot) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:  # noqa: BLE001
                logger.exception("Abonné en échec sur l'écran %s", snapshot.view.value)

    # ------------------------------------------------------------ Transitions -
    def _apply(self, intent: object) -> None:
        state = self._state
        view = state.view

        if view is ViewState.LOGGED_OUT:
            if isinstance(intent, SubmitLogin):
                self._login(intent)
            return

        # Au-delà de cette ligne une session existe toujours.
        counter = state.counter
        if counter is None:
            return

        if view is ViewState.WELCOME:
            if isinstance(intent, PressIncrement):
                state.view = ViewState.INCREMENT
            elif isinstance(intent, PressDecrement):
                state.view = ViewState.DECREMENT
            elif isinstance(intent, PressNav) and intent.target in _NAV_TARGETS:
                state.view = intent.target
        elif view is ViewState.INCREMENT:
            if isinstance(intent, PressIncrement):
                counter.increment()
            elif isinstance(intent, PressBack):
                state.view = ViewState.WELCOME
        elif view is ViewState.DECREMENT:
            if isinstance(intent, PressDecrement):
                counter.decrement()
            elif isinstance(intent, PressBack):
                state.view = ViewState.WELCOME
        elif view is ViewState.SUMMARY:
            if isinstance(intent, PressBack):
                state.view = ViewState.WELCOME

    def _login(self, intent: SubmitLogin) -> None:
        try:
            session = self._auth_gate.authenticate(intent.username, intent.password)
        except AuthError as exc:
            self.last_auth_error = exc
            logger.warning("Connexion refusée : %s", type(exc).__name__)
            return

        self.last_auth_error = None
        self._state.start_session(session)
        logger.info("Connecté en tant que %s", session.username)
