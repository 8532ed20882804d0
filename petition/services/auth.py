"""Serwis kont - hashowanie hasel i zakladanie uzytkownikow."""

from typing import Optional

import bcrypt
from sqlalchemy.orm import Session

from ..models import User


def hash_password(password: str, rounds: int = 12) -> str:
    """Hashuj haslo przy uzyciu bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Zweryfikuj haslo (porownanie bcrypt w stalym czasie)."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except ValueError:
        # Uszkodzony hash w bazie - traktuj jak bledne haslo
        return False


class AuthService:
    """Serwis do zakladania kont (skrypty, testy)."""

    def __init__(self, db: Session, rounds: int = 12):
        self.db = db
        self.rounds = rounds

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Pobierz uzytkownika po nazwie (dokladne dopasowanie)."""
        return self.db.query(User).filter(User.username == username).first()

    def create_user(
        self,
        username: str,
        password: str,
        is_admin: bool = False,
    ) -> User:
        """Utworz nowego uzytkownika."""
        user = User(
            username=username,
            hashed_password=hash_password(password, self.rounds),
            is_admin=is_admin,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
