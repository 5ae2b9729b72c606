"""Validation des identifiants de connexion."""

from __future__ import annotations

import logging

from clicktally.state import Session

logger = logging.getLogger(__name__)


class AuthError(RuntimeError):
    """Erreur générique levée lorsqu'une tentative de connexion échoue."""


class EmptyUsername(AuthError):
    """Le nom d'utilisateur est vide."""


class EmptyPassword(AuthError):
    """Le mot de passe est vide."""


class MissingCredentials(EmptyUsername, EmptyPassword):
    """Le nom d'utilisateur et le mot de passe sont vides."""


class AuthGate:
    """Service responsable de l'authentification locale.

    Aucune vérification distante : une tentative réussit dès que le nom
    d'utilisateur et le mot de passe sont renseignés. Les espaces ne sont
    pas retirés, ``" "`` est donc une valeur acceptée.
    """

    def authenticate(self, username: str | None, password: str | None) -> Session:
        """Retourne une session pour ``username`` ou lève une ``AuthError``."""
        has_username = bool(username)
        has_password = bool(password)

        if not has_username and not has_password:
            raise MissingCredentials("Veuillez saisir un nom d'utilisateur et un mot de passe.")
        if not has_username:
            raise EmptyUsername("Veuillez saisir un nom d'utilisateur.")
        if not has_password:
            raise EmptyPassword("Veuillez saisir un mot de passe.")

        logger.debug("Identifiants acceptés pour %s", username)
        return Session(username=username)
