from __future__ import annotations

import pytest

from clicktally.controller import NavigationController
from clicktally.intents import SubmitLogin


@pytest.fixture
def controller() -> NavigationController:
    return NavigationController()


@pytest.fixture
def logged_in(controller: NavigationController) -> NavigationController:
    """Contrôleur déjà positionné sur l'accueil pour « testuser »."""
    controller.dispatch(SubmitLogin("testuser", "password123"))
    return controller
