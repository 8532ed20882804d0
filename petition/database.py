"""Konfiguracja bazy danych."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool


class Base(DeclarativeBase):
    """Bazowa klasa dla modeli SQLAlchemy."""

    pass


def build_engine(database_url: str) -> Engine:
    """Utwórz engine zależnie od typu bazy."""
    if "postgresql" in database_url:
        # PostgreSQL - z connection pooling
        return create_engine(
            database_url,
            poolclass=QueuePool,
            pool_size=5,          # Liczba stałych połączeń
            max_overflow=10,      # Dodatkowe połączenia w szczycie
            pool_pre_ping=True,   # Sprawdzaj połączenie przed użyciem
            pool_recycle=3600,    # Odnawiaj połączenia co godzinę
        )

    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # Baza w pamięci musi żyć na jednym połączeniu
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # SQLite - bez poolingu, tylko check_same_thread
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    """Fabryka sesji bazy danych dla repozytoriów."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """Inicjalizacja bazy danych (tworzenie tabel)."""
    from . import models  # noqa: F401 - rejestracja modeli w Base.metadata

    Base.metadata.create_all(bind=engine)
