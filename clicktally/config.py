"""Gestion centralisée de la configuration de l'application."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_TITLE = "ClickTally"
DEFAULT_THEME = "dark"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_WINDOW_WIDTH = 420
DEFAULT_WINDOW_HEIGHT = 360
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_THEMES = ("dark", "light")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    """Erreur levée lorsque la configuration est invalide."""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Paramètres de la fenêtre et de la journalisation."""

    title: str = DEFAULT_TITLE
    theme: str = DEFAULT_THEME
    log_level: str = DEFAULT_LOG_LEVEL
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT

    @property
    def geometry(self) -> str:
        return f"{self.window_width}x{self.window_height}"


def _read_dimension(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} doit être un entier, reçu {raw!r}.") from exc
    if value <= 0:
        raise ConfigError(f"{name} doit être strictement positif, reçu {value}.")
    return value


def load_config(dotenv_path: str | Path | None = None) -> AppConfig:
    """Charge la configuration depuis l'environnement (et un éventuel ``.env``).

    Les variables déjà présentes dans l'environnement priment sur le fichier.
    """
    load_dotenv(dotenv_path)

    title = os.getenv("CLICKTALLY_TITLE", DEFAULT_TITLE)
    theme = os.getenv("CLICKTALLY_THEME", DEFAULT_THEME).lower()
    log_level = os.getenv("CLICKTALLY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    if theme not in _THEMES:
        raise ConfigError(f"Thème inconnu : {theme!r} (attendu : {', '.join(_THEMES)}).")
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"Niveau de journalisation inconnu : {log_level!r}.")

    return AppConfig(
        title=title,
        theme=theme,
        log_level=log_level,
        window_width=_read_dimension("CLICKTALLY_WINDOW_WIDTH", DEFAULT_WINDOW_WIDTH),
        window_height=_read_dimension("CLICKTALLY_WINDOW_HEIGHT", DEFAULT_WINDOW_HEIGHT),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Installe un unique handler console sur le logger racine."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
