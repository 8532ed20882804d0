"""Stronicowana lista podpisów dla panelu administracyjnego."""

from typing import Protocol
from urllib.parse import urlencode

from ..schemas import Link, PageLinks, PageResult, SignatureResponse


class PageSource(Protocol):
    async def count(self) -> int: ...

    async def fetch_page(self, offset: int, limit: int) -> list[SignatureResponse]: ...


class PaginatedLister:
    """Buduje ``PageResult`` z linkami self/prev/next.

    Linki przesuwają się o całą stronę: ``prev`` wskazuje
    ``max(0, offset - limit)``, ale nigdy dalej niż początek ostatniej
    istniejącej strony. ``next`` wskazuje ``offset + limit`` i jest obecny
    tylko gdy za bieżącą stroną zostały jeszcze rekordy.
    """

    def __init__(
        self,
        source: PageSource,
        base_url: str = "",
        path: str = "/admin",
        default_limit: int = 50,
        max_limit: int = 500,
    ):
        self.source = source
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.default_limit = default_limit
        self.max_limit = max_limit

    def clamp(self, offset: int, limit: int) -> tuple[int, int]:
        """Sprowadź parametry do ``offset >= 0`` i ``1 <= limit <= max_limit``."""
        offset = max(0, int(offset))
        limit = int(limit)
        if limit <= 0:
            limit = self.default_limit
        return offset, min(limit, self.max_limit)

    def link(self, offset: int, limit: int) -> Link:
        query = urlencode({"offset": offset, "limit": limit})
        return Link(href=f"{self.base_url}{self.path}?{query}")

    async def list(self, offset: int, limit: int) -> PageResult:
        offset, limit = self.clamp(offset, limit)

        total = await self.source.count()
        items = await self.source.fetch_page(offset, limit)

        links = PageLinks(self_=self.link(offset, limit))

        if offset > 0:
            # Za końcem danych prev wskazuje ostatnią istniejącą stronę
            last_start = ((total - 1) // limit) * limit if total else 0
            links.prev = self.link(max(0, min(offset - limit, last_start)), limit)

        if offset + len(items) < total:
            links.next = self.link(offset + limit, limit)

        return PageResult(
            links=links,
            items=items,
            offset=offset,
            limit=limit,
            total=total,
        )
