"""Interface Tkinter principale."""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

import sv_ttk

from clicktally.config import AppConfig
from clicktally.controller import NavigationController
from clicktally.intents import SubmitLogin
from clicktally.state import ViewSnapshot, ViewState
from clicktally.ui.screens import (
    PASSWORD_INPUT_ID,
    SUBMIT_BUTTON_ID,
    USERNAME_INPUT_ID,
    Widget,
    WidgetKind,
    build_screen,
)

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#121212"
CARD_COLOR = "#181818"
STATUS_NEUTRAL_COLOR = "#B3B3B3"
STATUS_ERROR_COLOR = "#F87171"
STATUS_SUCCESS_COLOR = "#1DB954"


class MainWindow:
    """Fenêtre principale de l'application."""

    def __init__(self, controller: NavigationController, config: AppConfig | None = None) -> None:
        self._controller = controller
        self._config = config or AppConfig()

        self.root = tk.Tk()
        self.root.title(self._config.title)
        self.root.geometry(self._config.geometry)
        self.root.minsize(self._config.window_width, self._config.window_height)

        sv_ttk.set_theme(self._config.theme)
        self.root.configure(bg=BACKGROUND_COLOR)
        self._configure_styles()

        # Champs de saisie courants, indexés par identifiant de test.
        self._inputs: dict[str, tk.StringVar] = {}
        self.widgets_by_test_id: dict[str, tk.Widget] = {}

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(1, weight=1)

        self._build_header()
        self._content: ttk.Frame | None = None

        self._unsubscribe = controller.subscribe(self._on_snapshot)
        self._render(controller.snapshot)

    # --------------------------------------------------------------------- UI -
    def _configure_styles(self) -> None:
        style = ttk.Style()
        style.configure("Main.TFrame", background=BACKGROUND_COLOR)
        style.configure("Header.TFrame", background=BACKGROUND_COLOR)
        style.configure("Card.TFrame", background=CARD_COLOR)
        style.configure(
            "HeaderTitle.TLabel",
            background=CARD_COLOR,
            foreground="#FFFFFF",
            font=("Helvetica", 20, "bold"),
        )
        style.configure(
            "Body.TLabel",
            background=CARD_COLOR,
            foreground="#FFFFFF",
            font=("Helvetica", 13),
        )
        style.configure(
            "Field.TLabel",
            background=CARD_COLOR,
            foreground=STATUS_NEUTRAL_COLOR,
            font=("Helvetica", 10),
        )
        style.configure(
            "Status.TLabel",
            background=BACKGROUND_COLOR,
            foreground=STATUS_NEUTRAL_COLOR,
            font=("Helvetica", 11),
        )
        style.configure("Accent.TButton", font=("Helvetica", 11, "bold"))
        style.map(
            "Accent.TButton",
            background=[("active", "#1ED760"), ("pressed", "#1AA34A")],
        )
        style.configure("TButton", padding=(16, 8))
        self.root.option_add("*Font", "Helvetica 11")

    def _build_header(self) -> None:
        frame = ttk.Frame(self.root, style="Header.TFrame", padding=(24, 8))
        frame.grid(row=0, column=0, sticky="nwe")
        frame.columnconfigure(0, weight=1)

        self._status_label = ttk.Label(
            frame,
            text="Non connecté",
            style="Status.TLabel",
        )
        self._status_label.grid(row=0, column=0, sticky="w")

    def _render(self, snapshot: ViewSnapshot) -> None:
        screen = build_screen(snapshot)
        logger.debug("Rendu de l'écran %s", screen.view.value)
        # Conserve la saisie après une connexion refusée.
        previous_values = {key: var.get() for key, var in self._inputs.items()}
        if self._content is not None:
            self._content.destroy()
        self._inputs.clear()
        self.widgets_by_test_id.clear()

        frame = ttk.Frame(self.root, style="Card.TFrame", padding=(24, 20))
        frame.grid(row=1, column=0, sticky="nsew", padx=24, pady=(8, 24))
        frame.columnconfigure(0, weight=1)
        self._content = frame

        for row, widget in enumerate(screen.widgets):
            self._build_widget(frame, row, widget, previous_values)

        self._update_status(snapshot)

    def _build_widget(
        self,
        parent: ttk.Frame,
        row: int,
        widget: Widget,
        previous_values: dict[str, str],
    ) -> None:
        if widget.kind is WidgetKind.INPUT:
            ttk.Label(parent, text=widget.text, style="Field.TLabel").grid(
                row=row * 2, column=0, sticky="w", pady=(8, 0)
            )
            variable = tk.StringVar(value=previous_values.get(widget.test_id or "", ""))
            entry = ttk.Entry(
                parent,
                textvariable=variable,
                show="•" if widget.secret else "",
            )
            entry.grid(row=row * 2 + 1, column=0, sticky="ew", ipady=4)
            entry.bind("<Return>", lambda _: self.submit_login())
            if widget.test_id:
                self._inputs[widget.test_id] = variable
                self.widgets_by_test_id[widget.test_id] = entry
            if widget.test_id == USERNAME_INPUT_ID:
                entry.focus()
            return

        if widget.kind is WidgetKind.BUTTON:
            if widget.test_id == SUBMIT_BUTTON_ID:
                command = self.submit_login
            else:
                command = lambda intent=widget.intent: self._controller.dispatch(intent)
            created = ttk.Button(parent, text=widget.text, command=command, style="Accent.TButton")
            created.grid(row=row * 2, column=0, sticky="ew", pady=(12, 0))
        else:
            style = "HeaderTitle.TLabel" if widget.kind is WidgetKind.TITLE else "Body.TLabel"
            created = ttk.Label(parent, text=widget.text, style=style)
            created.grid(row=row * 2, column=0, sticky="w", pady=(4, 4))

        if widget.test_id:
            self.widgets_by_test_id[widget.test_id] = created

    def _update_status(self, snapshot: ViewSnapshot) -> None:
        error = self._controller.last_auth_error
        if snapshot.view is ViewState.LOGGED_OUT:
            if error is not None:
                self._status_label.configure(text=str(error), foreground=STATUS_ERROR_COLOR)
            else:
                self._status_label.configure(text="Non connecté", foreground=STATUS_NEUTRAL_COLOR)
            return

        username = snapshot.username or "Utilisateur"
        self._status_label.configure(
            text=f"Connecté en tant que : {username}",
            foreground=STATUS_SUCCESS_COLOR,
        )

    # --------------------------------------------------------------- Callbacks -
    def _on_snapshot(self, snapshot: ViewSnapshot) -> None:
        # Le bouton pressé appartient au cadre détruit par le rendu.
        self.root.after_idle(self._render, snapshot)

    def submit_login(self) -> None:
        username = self._inputs.get(USERNAME_INPUT_ID)
        password = self._inputs.get(PASSWORD_INPUT_ID)
        if username is None or password is None:
            return

        self._controller.dispatch(SubmitLogin(username=username.get(), password=password.get()))

    # ----------------------------------------------------------------- Public -
    def run(self) -> None:
        try:
            self.root.mainloop()
        finally:
            self._unsubscribe()
