"""Point d'entrée de l'application ClickTally."""

from __future__ import annotations

import logging
import sys

from clicktally.config import ConfigError, configure_logging, load_config
from clicktally.controller import NavigationController
from clicktally.services import AuthGate
from clicktally.ui.app import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Initialise les dépendances puis lance l'interface Tkinter."""
    try:
        config = load_config()
    except ConfigError as exc:
        configure_logging()
        logger.error("Configuration invalide : %s", exc)
        return 1

    configure_logging(config.log_level)
    controller = NavigationController(auth_gate=AuthGate())
    app = MainWindow(controller=controller, config=config)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
