"""Bramka uwierzytelniania - stan żądania względem sesji i konta."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .credentials import Principal, VerifyResult
from .session import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Nieprawidłowy login lub hasło."


class AuthState(enum.Enum):
    """Stany bramki.

    ANONYMOUS i AUTHENTICATED to jedyne stany spoczynkowe; AUTHENTICATING
    i REJECTED są chwilowymi wynikami pojedynczego żądania logowania.
    """

    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


class Credentials(Protocol):
    async def verify(self, username: str, secret: str) -> VerifyResult: ...

    async def get_principal(self, principal_id: int) -> Optional[Principal]: ...


@dataclass(frozen=True)
class AuthContext:
    """Wynik rozwiązania sesji na początku żądania."""

    state: AuthState
    session_id: Optional[str] = None
    principal: Optional[Principal] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED and self.principal is not None


ANONYMOUS = AuthContext(AuthState.ANONYMOUS)


@dataclass(frozen=True)
class LoginResult:
    """Wynik ``AuthGate.submit``; ``session_id`` trafia do cookie."""

    state: AuthState
    session_id: str
    principal: Optional[Principal] = None


class AuthGate:
    """Maszyna stanów logowania zbudowana na ``CredentialStore`` i ``SessionStore``."""

    def __init__(self, credentials: Credentials, sessions: SessionStore, rolling: bool = False):
        self.credentials = credentials
        self.sessions = sessions
        self.rolling = rolling

    async def resolve(self, session_id: Optional[str]) -> AuthContext:
        """Ustal stan żądania na podstawie tokenu sesji.

        Nieznany, wygasły lub anonimowy token daje ANONYMOUS bez błędu.
        Sesja wskazująca na usunięte konto jest niszczona.
        """
        if not session_id:
            return ANONYMOUS

        session = self.sessions.get(session_id)
        if session is None:
            return ANONYMOUS

        if session.is_anonymous:
            return AuthContext(AuthState.ANONYMOUS, session_id=session_id)

        principal = await self.credentials.get_principal(session.principal_id)
        if principal is None:
            logger.warning(
                "Konto %s nie istnieje - unieważniam sesję", session.principal_id
            )
            self.sessions.destroy(session_id)
            return ANONYMOUS

        if self.rolling:
            self.sessions.refresh(session_id)

        return AuthContext(AuthState.AUTHENTICATED, session_id=session_id, principal=principal)

    async def submit(self, session_id: Optional[str], username: str, secret: str) -> LoginResult:
        """Przetwórz formularz logowania (stan AUTHENTICATING).

        Sukces kończy się w AUTHENTICATED z nową sesją, porażka w REJECTED
        z jednym komunikatem flash. Nieznane konto i złe hasło są
        nierozróżnialne dla klienta.
        """
        result = await self.credentials.verify(username, secret)

        if isinstance(result, Principal):
            # Nowy identyfikator po zalogowaniu, stary przestaje działać
            if session_id:
                self.sessions.destroy(session_id)
            new_id = self.sessions.create(result.id)
            logger.info("Zalogowano %s", result.username)
            return LoginResult(AuthState.AUTHENTICATED, new_id, result)

        logger.info("Nieudane logowanie dla %r (%s)", username, result.value)
        return LoginResult(AuthState.REJECTED, self._reject(session_id))

    def logout(self, session_id: Optional[str]) -> None:
        """Zniszcz sesję; bez sesji nic nie robi."""
        if session_id:
            self.sessions.destroy(session_id)

    def drain_messages(self, context: AuthContext) -> list[str]:
        """Komunikaty flash do pokazania na stronie logowania."""
        if not context.session_id:
            return []
        return self.sessions.drain_messages(context.session_id)

    def _reject(self, session_id: Optional[str]) -> str:
        session = self.sessions.get(session_id) if session_id else None
        if session is not None and not session.is_anonymous:
            # Zalogowany zostaje zalogowany; strona logowania i tak nie zostanie pokazana
            return session_id
        if session is not None and self.sessions.push_message(
            session_id, INVALID_CREDENTIALS, unique=True
        ):
            return session_id
        session_id = self.sessions.create(None)
        self.sessions.push_message(session_id, INVALID_CREDENTIALS)
        return session_id
