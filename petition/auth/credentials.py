"""Weryfikacja danych logowania."""

import enum
from dataclasses import dataclass
from typing import Optional, Union

import bcrypt
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from ..models import User
from ..services.auth import verify_password
from ..services.repository import Repository


class AuthFailure(enum.Enum):
    """Powód nieudanej weryfikacji. Na zewnątrz oba wyglądają tak samo."""

    NOT_FOUND = "not_found"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class Principal:
    """Konto, które może się uwierzytelnić. Tylko do odczytu."""

    id: int
    username: str
    password_hash: str
    is_admin: bool

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(
            id=user.id,
            username=user.username,
            password_hash=user.hashed_password,
            is_admin=bool(user.is_admin),
        )


VerifyResult = Union[Principal, AuthFailure]


class CredentialStore(Repository):
    """Wyszukiwanie kont i sprawdzanie haseł."""

    def __init__(self, session_factory: sessionmaker, timeout: float = 5.0, rounds: int = 12):
        super().__init__(session_factory, timeout)
        # Hash porównywany gdy konta nie ma - obie porażki kosztują tyle samo
        self._dummy_hash = bcrypt.hashpw(b"petition-dummy", bcrypt.gensalt(rounds=rounds)).decode("utf-8")

    async def verify(self, username: str, secret: str) -> VerifyResult:
        """Zwraca ``Principal`` albo ``AuthFailure``; brak konta nie rzuca wyjątku."""
        return await self._call("verify", self._verify, username, secret)

    async def get_principal(self, principal_id: int) -> Optional[Principal]:
        """Rozwiąż identyfikator zapisany w sesji. ``None`` jeśli konto usunięto."""
        return await self._call("get_principal", _get_principal, principal_id)

    def _verify(self, db: Session, username: str, secret: str) -> VerifyResult:
        user = db.scalars(select(User).where(User.username == username)).first()

        if user is None:
            verify_password(secret, self._dummy_hash)
            return AuthFailure.NOT_FOUND

        if not verify_password(secret, user.hashed_password):
            return AuthFailure.MISMATCH

        return Principal.from_user(user)


def _get_principal(db: Session, principal_id: int) -> Optional[Principal]:
    user = db.get(User, principal_id)
    if user is None:
        return None
    return Principal.from_user(user)
