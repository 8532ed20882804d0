"""Usuwanie podpisów - tylko dla zalogowanych."""

import enum
import logging
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..auth.gate import AuthGate

logger = logging.getLogger(__name__)


class DeletionOutcome(enum.Enum):
    DELETED = "deleted"
    UNAUTHORIZED = "unauthorized"


class DeletableSource(Protocol):
    async def delete_by_id(self, signature_id: int) -> bool: ...


class DeletionGate:
    """Łączy ``AuthGate`` z usunięciem rekordu.

    Sprawdzenie sesji zawsze poprzedza jakiekolwiek wywołanie repozytorium.
    """

    def __init__(self, gate: "AuthGate", repository: DeletableSource):
        self.gate = gate
        self.repository = repository

    async def delete_by_id(self, session_id: Optional[str], record_id: int) -> DeletionOutcome:
        context = await self.gate.resolve(session_id)
        if not context.is_authenticated:
            logger.info("Odmowa usunięcia podpisu %s - brak sesji", record_id)
            return DeletionOutcome.UNAUTHORIZED

        # Brak rekordu to też sukces - mógł go już usunąć inny admin
        await self.repository.delete_by_id(record_id)
        return DeletionOutcome.DELETED
