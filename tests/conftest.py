from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from petition.config import Settings
from petition.database import build_engine, build_session_factory, init_db
from petition.main import create_app
from petition.models import Signature, User
from petition.services.auth import AuthService

FAST_ROUNDS = 4


class FakeClock:
    """Zegar sterowany z testu."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        secret_key="test-secret",
        bcrypt_rounds=FAST_ROUNDS,
        session_ttl_seconds=60,
        session_sweep_interval=0,
    )


@pytest.fixture()
def engine(settings):
    engine = build_engine(settings.database_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def make_user(session_factory):
    """Załóż konto i zwróć jego id."""

    def _make(username: str = "admin", password: str = "secret", is_admin: bool = True) -> int:
        with session_factory() as db:
            user = AuthService(db, rounds=FAST_ROUNDS).create_user(
                username=username, password=password, is_admin=is_admin
            )
            return user.id

    return _make


@pytest.fixture()
def delete_user(session_factory):
    def _delete(user_id: int) -> None:
        with session_factory() as db:
            db.delete(db.get(User, user_id))
            db.commit()

    return _delete


@pytest.fixture()
def add_signatures(session_factory):
    """Wstaw ``count`` podpisów; id rosną od 1 w kolejności wstawiania."""

    def _add(count: int) -> None:
        start = datetime(2021, 3, 1, 12, 0)
        with session_factory() as db:
            db.add_all(
                Signature(
                    name=f"Osoba {i}",
                    national_id=f"{1000000000 + i}",
                    comment="Popieram" if i % 2 else None,
                    anonymous=i % 3 == 0,
                    created_at=start + timedelta(minutes=i),
                )
                for i in range(1, count + 1)
            )
            db.commit()

    return _add


@pytest.fixture()
def signature_exists(session_factory):
    def _exists(signature_id: int) -> bool:
        with session_factory() as db:
            return db.get(Signature, signature_id) is not None

    return _exists


@pytest.fixture()
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture()
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def login(client, make_user):
    """Zaloguj klienta jako admin/secret."""

    def _login(username: str = "admin", password: str = "secret"):
        make_user(username, password)
        return client.post(
            "/login",
            data={"username": username, "password": password},
            follow_redirects=False,
        )

    return _login
