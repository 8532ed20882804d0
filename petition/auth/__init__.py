"""Modul autentykacji - konta, sesje i bramka logowania."""

from .credentials import AuthFailure, CredentialStore, Principal
from .gate import AuthContext, AuthGate, AuthState, INVALID_CREDENTIALS, LoginResult
from .session import Session, SessionManager, SessionStore

__all__ = [
    "AuthFailure",
    "CredentialStore",
    "Principal",
    "AuthContext",
    "AuthGate",
    "AuthState",
    "INVALID_CREDENTIALS",
    "LoginResult",
    "Session",
    "SessionManager",
    "SessionStore",
]
