"""Services métier de ClickTally."""

from clicktally.services.auth_gate import (
    AuthError,
    AuthGate,
    EmptyPassword,
    EmptyUsername,
    MissingCredentials,
)

__all__ = [
    "AuthError",
    "AuthGate",
    "EmptyPassword",
    "EmptyUsername",
    "MissingCredentials",
]
