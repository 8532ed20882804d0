import asyncio
from datetime import datetime

import pytest

from petition.schemas import SignatureResponse
from petition.services import PaginatedLister


class FakeSource:
    def __init__(self, size: int):
        self.records = [
            SignatureResponse(
                id=i,
                name=f"Osoba {i}",
                national_id=f"{1000000000 + i}",
                comment=None,
                anonymous=False,
                created_at=datetime(2021, 3, 1),
            )
            for i in range(1, size + 1)
        ]
        self.fetches = []

    async def count(self):
        return len(self.records)

    async def fetch_page(self, offset, limit):
        self.fetches.append((offset, limit))
        return self.records[offset:offset + limit]


def page(lister, offset, limit):
    return asyncio.run(lister.list(offset, limit))


@pytest.fixture()
def source():
    return FakeSource(120)


@pytest.fixture()
def lister(source):
    return PaginatedLister(source)


def test_first_page(lister):
    result = page(lister, 0, 50)

    assert len(result.items) == 50
    assert result.items[0].id == 1
    assert result.total == 120
    assert result.links.self_.href == "/admin?offset=0&limit=50"
    assert result.links.prev is None
    assert result.links.next.href == "/admin?offset=50&limit=50"


def test_last_partial_page(lister):
    result = page(lister, 100, 50)

    assert len(result.items) == 20
    assert result.items[0].id == 101
    assert result.links.prev.href == "/admin?offset=50&limit=50"
    assert result.links.next is None


def test_prev_present_iff_offset_positive(lister):
    assert page(lister, 0, 10).links.prev is None
    assert page(lister, 1, 10).links.prev.href == "/admin?offset=0&limit=10"
    assert page(lister, 35, 10).links.prev.href == "/admin?offset=25&limit=10"


@pytest.mark.parametrize("offset, limit, has_next", [
    (0, 119, True),
    (0, 120, False),
    (70, 50, False),
    (69, 50, True),
    (200, 50, False),
])
def test_next_present_iff_records_remain(lister, offset, limit, has_next):
    assert (page(lister, offset, limit).links.next is not None) is has_next


def test_prev_past_the_end_points_at_last_page(lister):
    assert page(lister, 200, 50).links.prev.href == "/admin?offset=100&limit=50"
    assert page(lister, 130, 10).links.prev.href == "/admin?offset=110&limit=10"


def test_prev_on_empty_repository_points_at_start():
    result = page(PaginatedLister(FakeSource(0)), 100, 50)

    assert result.items == []
    assert result.links.prev.href == "/admin?offset=0&limit=50"


def test_self_link_echoes_parameters(lister):
    result = page(lister, 17, 3)

    assert result.links.self_.href == "/admin?offset=17&limit=3"
    assert (result.offset, result.limit) == (17, 3)


def test_out_of_range_parameters_are_clamped(source):
    lister = PaginatedLister(source, default_limit=50, max_limit=100)

    assert page(lister, -5, 10).offset == 0
    assert page(lister, 0, 0).limit == 50
    assert page(lister, 0, -3).limit == 50
    assert page(lister, 0, 1000).limit == 100
    assert all(offset >= 0 and limit > 0 for offset, limit in source.fetches)


def test_empty_repository():
    result = page(PaginatedLister(FakeSource(0)), 0, 50)

    assert result.items == []
    assert result.links.prev is None
    assert result.links.next is None


def test_links_use_public_url(source):
    lister = PaginatedLister(source, base_url="https://petycja.example/")

    assert page(lister, 0, 50).links.self_.href == "https://petycja.example/admin?offset=0&limit=50"


def test_json_form_omits_missing_links(lister):
    data = page(lister, 0, 50).to_json()

    assert set(data["_links"]) == {"self", "next"}
    assert data["_links"]["self"]["href"] == "/admin?offset=0&limit=50"
    assert len(data["items"]) == 50
