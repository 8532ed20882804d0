"""Skrypt do tworzenia administratorow panelu podpisow.

Uzycie:
    python scripts/create_admin.py <username> <password>
    python scripts/create_admin.py --list

Przyklad:
    python scripts/create_admin.py admin tajnehaslo123
"""

import sys
from pathlib import Path

# Dodaj katalog projektu do sciezki
sys.path.insert(0, str(Path(__file__).parent.parent))

from petition.config import get_settings
from petition.database import build_engine, build_session_factory, init_db
from petition.models import User
from petition.services.auth import AuthService


def _session_factory():
    settings = get_settings()
    engine = build_engine(settings.database_url)
    init_db(engine)
    return build_session_factory(engine), settings


def create_admin(username: str, password: str):
    """Utworz nowego administratora."""
    session_factory, settings = _session_factory()

    with session_factory() as db:
        auth = AuthService(db, rounds=settings.bcrypt_rounds)

        # Sprawdz czy uzytkownik juz istnieje
        if auth.get_user_by_username(username):
            print(f"Blad: Uzytkownik '{username}' juz istnieje!")
            sys.exit(1)

        user = auth.create_user(username=username, password=password, is_admin=True)

        print(f"Sukces! Utworzono administratora: {user.username}")
        print(f"  ID: {user.id}")
        print(f"\nMozesz teraz zalogowac sie na http://localhost:{settings.port}/admin")


def list_admins():
    """Wyswietl liste kont."""
    session_factory, _ = _session_factory()

    with session_factory() as db:
        users = db.query(User).order_by(User.id).all()

        if not users:
            print("Brak kont w bazie danych.")
            print("Uzyj: python scripts/create_admin.py <username> <password>")
            return

        print("Lista kont:")
        print("-" * 50)
        for user in users:
            role = " (admin)" if user.is_admin else ""
            print(f"  {user.id}. {user.username}{role}")
        print("-" * 50)
        print(f"Razem: {len(users)} uzytkownikow")


if __name__ == "__main__":
    if len(sys.argv) == 1 or (len(sys.argv) == 2 and sys.argv[1] in ("--list", "-l")):
        list_admins()
    elif len(sys.argv) == 3:
        username = sys.argv[1]
        password = sys.argv[2]

        if len(password) < 6:
            print("Blad: Haslo musi miec co najmniej 6 znakow!")
            sys.exit(1)

        create_admin(username, password)
    else:
        print(__doc__)
        sys.exit(1)
