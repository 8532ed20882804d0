"""Repozytorium podpisów."""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import DuplicateSignatureError
from ..models import Signature
from ..schemas import SignatureCreate, SignatureResponse
from .repository import Repository, commit_or_rollback

logger = logging.getLogger(__name__)


class SignatureRepository(Repository):
    """Odczyt stron, liczenie, dodawanie i usuwanie podpisów."""

    async def count(self) -> int:
        return await self._call("count", _count)

    async def fetch_page(self, offset: int, limit: int) -> list[SignatureResponse]:
        """Pobierz ``limit`` podpisów od pozycji ``offset`` (kolejność wstawiania)."""
        return await self._call("fetch_page", _fetch_page, offset, limit)

    async def create(self, data: SignatureCreate) -> SignatureResponse:
        """Zapisz podpis. ``DuplicateSignatureError`` gdy numer już podpisał."""
        created = await self._call("create", _create, data)
        if created is None:
            raise DuplicateSignatureError(data.national_id)
        return created

    async def delete_by_id(self, signature_id: int) -> bool:
        """Usuń podpis jednym poleceniem DELETE.

        Zwraca ``True`` jeśli wiersz istniał. Brak wiersza nie jest błędem.
        """
        removed = await self._call("delete_by_id", _delete_by_id, signature_id)
        if removed:
            logger.info("Usunięto podpis %s", signature_id)
        return removed


def _count(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(Signature)) or 0


def _fetch_page(db: Session, offset: int, limit: int) -> list[SignatureResponse]:
    rows = db.scalars(
        select(Signature).order_by(Signature.id).offset(offset).limit(limit)
    ).all()
    return [SignatureResponse.model_validate(row) for row in rows]


def _create(db: Session, data: SignatureCreate):
    signature = Signature(**data.model_dump())
    db.add(signature)
    try:
        commit_or_rollback(db)
    except IntegrityError:
        return None
    db.refresh(signature)
    return SignatureResponse.model_validate(signature)


def _delete_by_id(db: Session, signature_id: int) -> bool:
    result = db.execute(delete(Signature).where(Signature.id == signature_id))
    commit_or_rollback(db)
    return result.rowcount > 0
