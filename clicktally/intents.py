"""Intentions utilisateur transmises par la couche UI au contrôleur."""

from __future__ import annotations

from dataclasses import dataclass, field

from clicktally.state import ViewState


@dataclass(frozen=True, slots=True)
class SubmitLogin:
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class PressIncrement:
    pass


@dataclass(frozen=True, slots=True)
class PressDecrement:
    pass


@dataclass(frozen=True, slots=True)
class PressBack:
    pass


@dataclass(frozen=True, slots=True)
class PressNav:
    """Navigation depuis l'accueil vers ``target``."""

    target: ViewState

    @classmethod
    def summary(cls) -> PressNav:
        """Intention du bouton « Summary » de l'accueil."""
        return cls(ViewState.SUMMARY)


Intent = SubmitLogin | PressIncrement | PressDecrement | PressBack | PressNav
