"""Wspólna baza repozytoriów - wywołania bazy z limitem czasu."""

import asyncio
import functools
import logging
from typing import Any, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..exceptions import RepositoryError, RepositoryTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository:
    """Uruchamia blokujące zapytania SQLAlchemy w executorze.

    Każde wywołanie dostaje własną sesję bazy i jest ograniczone przez
    ``timeout``. Po przekroczeniu czasu wynik zostaje porzucony, a wołający
    dostaje ``RepositoryTimeout``.
    """

    def __init__(self, session_factory: sessionmaker, timeout: float = 5.0):
        self.session_factory = session_factory
        self.timeout = timeout

    def _in_session(self, fn: Callable[..., T], *args: Any) -> T:
        with self.session_factory() as db:
            return fn(db, *args)

    async def _call(self, operation: str, fn: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        job = loop.run_in_executor(
            None, functools.partial(self._in_session, fn, *args)
        )
        try:
            return await asyncio.wait_for(job, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error("Repozytorium: %s przekroczyło %.1fs", operation, self.timeout)
            raise RepositoryTimeout(operation, self.timeout) from None
        except SQLAlchemyError as exc:
            logger.exception("Repozytorium: błąd operacji %s", operation)
            raise RepositoryError(str(exc), operation=operation) from exc


def commit_or_rollback(db: Session) -> None:
    """Zatwierdź transakcję; przy błędzie wycofaj i przekaż wyjątek dalej."""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
