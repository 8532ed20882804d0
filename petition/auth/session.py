"""Zarzadzanie sesjami - magazyn po stronie serwera i podpisywane cookies."""

import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from itsdangerous import URLSafeSerializer, BadSignature
from fastapi import Request, Response


@dataclass(frozen=True)
class Session:
    """Migawka sesji zwracana przez ``SessionStore.get``.

    ``principal_id`` to tylko identyfikator konta; ``None`` oznacza sesję
    anonimową, która przenosi wyłącznie komunikaty flash.
    """

    session_id: str
    principal_id: Optional[int]
    created_at: float
    expires_at: float
    flash_messages: tuple[str, ...] = ()

    @property
    def is_anonymous(self) -> bool:
        return self.principal_id is None


@dataclass
class _Entry:
    principal_id: Optional[int]
    created_at: float
    expires_at: float
    messages: list[str] = field(default_factory=list)
    destroyed: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionStore:
    """Sesje w pamięci procesu z TTL i kolejką komunikatów flash.

    Każdy wpis ma własną blokadę, więc operacje na różnych sesjach nie
    czekają na siebie. Wygasłe wpisy usuwane są leniwie przy odczycie;
    ``purge_expired`` można wołać okresowo dla porządku w pamięci.
    """

    def __init__(self, ttl_seconds: float = 20, clock: Callable[[], float] = time.time):
        if ttl_seconds <= 0:
            raise ValueError("TTL sesji musi być dodatni")
        self.ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def create(self, principal_id: Optional[int]) -> str:
        """Utwórz sesję i zwróć jej nieprzewidywalny identyfikator."""
        now = self._clock()
        session_id = secrets.token_urlsafe(32)
        self._entries[session_id] = _Entry(
            principal_id=principal_id,
            created_at=now,
            expires_at=now + self.ttl,
        )
        return session_id

    def get(self, session_id: str) -> Optional[Session]:
        """Zwróć sesję lub ``None`` gdy nieznana albo wygasła."""
        entry = self._live_entry(session_id)
        if entry is None:
            return None
        with entry.lock:
            if entry.destroyed:
                return None
            return Session(
                session_id=session_id,
                principal_id=entry.principal_id,
                created_at=entry.created_at,
                expires_at=entry.expires_at,
                flash_messages=tuple(entry.messages),
            )

    def refresh(self, session_id: str) -> bool:
        """Przesuń wygaśnięcie na ``teraz + TTL``. ``False`` gdy sesji już nie ma."""
        entry = self._live_entry(session_id)
        if entry is None:
            return False
        with entry.lock:
            if entry.destroyed:
                return False
            entry.expires_at = self._clock() + self.ttl
            return True

    def destroy(self, session_id: str) -> None:
        """Usuń sesję. Wielokrotne wywołanie jest bezpieczne."""
        entry = self._entries.get(session_id)
        if entry is None:
            return
        with entry.lock:
            entry.destroyed = True
            entry.messages.clear()
            self._entries.pop(session_id, None)

    def push_message(self, session_id: str, text: str, unique: bool = False) -> bool:
        """Dodaj komunikat flash. ``False`` gdy sesja nie istnieje.

        Z ``unique=True`` komunikat już czekający w kolejce nie jest dublowany.
        """
        entry = self._live_entry(session_id)
        if entry is None:
            return False
        with entry.lock:
            if entry.destroyed:
                return False
            if not (unique and text in entry.messages):
                entry.messages.append(text)
            return True

    def drain_messages(self, session_id: str) -> list[str]:
        """Zwróć i wyczyść kolejkę komunikatów - każdy pojawia się raz."""
        entry = self._live_entry(session_id)
        if entry is None:
            return []
        with entry.lock:
            if entry.destroyed:
                return []
            messages = list(entry.messages)
            entry.messages.clear()
            return messages

    def purge_expired(self) -> int:
        """Usuń wszystkie wygasłe wpisy. Zwraca liczbę usuniętych."""
        now = self._clock()
        removed = 0
        for session_id, entry in list(self._entries.items()):
            if now >= entry.expires_at:
                self._evict(session_id, entry, now)
                removed += 1
        return removed

    def __len__(self) -> int:
        return len(self._entries)

    def _live_entry(self, session_id: str) -> Optional[_Entry]:
        if not session_id:
            return None
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        now = self._clock()
        if now >= entry.expires_at:
            self._evict(session_id, entry, now)
            return None
        return entry

    def _evict(self, session_id: str, entry: _Entry, now: float) -> None:
        with entry.lock:
            # refresh() mógł w międzyczasie przedłużyć sesję
            if now < entry.expires_at:
                return
            entry.destroyed = True
            if self._entries.get(session_id) is entry:
                self._entries.pop(session_id, None)


class SessionManager:
    """Transport identyfikatora sesji w podpisanym cookie.

    Cookie zawiera wyłącznie identyfikator sesji - dane konta zawsze są
    rozwiązywane po stronie serwera przez ``SessionStore``.
    """

    def __init__(
        self,
        secret_key: str,
        cookie_name: str = "petition_session",
        max_age: int = 20,
        secure: bool = False,
    ):
        # O wygaśnięciu decyduje SessionStore, podpis chroni tylko przed podróbką
        self.serializer = URLSafeSerializer(secret_key, salt="petition.session")
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    def set_session(self, response: Response, session_id: str) -> None:
        """Ustaw cookie z identyfikatorem sesji."""
        token = self.serializer.dumps(session_id)
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age,
            httponly=True,
            samesite="lax",
            secure=self.secure,
        )

    def get_session_id(self, request: Request) -> Optional[str]:
        """Pobierz identyfikator sesji z cookie. ``None`` jeśli brak lub podrobione."""
        token = request.cookies.get(self.cookie_name)

        if not token:
            return None

        try:
            session_id = self.serializer.loads(token)
        except BadSignature:
            return None
        return session_id if isinstance(session_id, str) else None

    def clear_session(self, response: Response) -> None:
        """Usun cookie sesji (wylogowanie)."""
        response.delete_cookie(self.cookie_name)
