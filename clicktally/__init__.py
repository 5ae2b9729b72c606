"""ClickTally : compteur partagé derrière un écran de connexion."""

__version__ = "0.1.0"
