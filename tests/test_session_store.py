import threading

import pytest

from petition.auth import SessionStore


@pytest.fixture()
def store(clock):
    return SessionStore(ttl_seconds=20, clock=clock)


def test_create_and_get(store, clock):
    session_id = store.create(7)

    session = store.get(session_id)

    assert session.principal_id == 7
    assert session.created_at == clock.now
    assert session.expires_at == clock.now + 20
    assert session.flash_messages == ()


def test_session_ids_are_unpredictable(store):
    ids = {store.create(1) for _ in range(100)}

    assert len(ids) == 100
    assert all(len(session_id) >= 40 for session_id in ids)


def test_unknown_session_is_absent(store):
    assert store.get("nope") is None
    assert store.get("") is None


def test_session_expires_without_destroy(store, clock):
    session_id = store.create(1)

    clock.advance(19.9)
    assert store.get(session_id) is not None

    clock.advance(0.1)
    assert store.get(session_id) is None
    # Wygasły wpis usunięty przy odczycie
    assert len(store) == 0


def test_refresh_extends_expiry(store, clock):
    session_id = store.create(1)
    clock.advance(15)

    assert store.refresh(session_id) is True
    clock.advance(15)

    assert store.get(session_id) is not None


def test_refresh_of_expired_session_fails(store, clock):
    session_id = store.create(1)
    clock.advance(25)

    assert store.refresh(session_id) is False


def test_destroy_is_idempotent(store):
    session_id = store.create(1)

    store.destroy(session_id)
    store.destroy(session_id)
    store.destroy("never-existed")

    assert store.get(session_id) is None


def test_drain_messages_returns_messages_once(store):
    session_id = store.create(None)
    store.push_message(session_id, "pierwszy")
    store.push_message(session_id, "drugi")

    assert store.drain_messages(session_id) == ["pierwszy", "drugi"]
    assert store.drain_messages(session_id) == []


def test_messages_visible_in_snapshot(store):
    session_id = store.create(None)
    store.push_message(session_id, "hej")

    assert store.get(session_id).flash_messages == ("hej",)
    assert store.get(session_id).is_anonymous


def test_unique_message_is_not_duplicated(store):
    session_id = store.create(None)

    assert store.push_message(session_id, "hej", unique=True)
    assert store.push_message(session_id, "hej", unique=True)
    store.push_message(session_id, "inny", unique=True)

    assert store.drain_messages(session_id) == ["hej", "inny"]

    # Po odczycie ten sam komunikat można dodać ponownie
    store.push_message(session_id, "hej", unique=True)
    assert store.drain_messages(session_id) == ["hej"]


def test_push_to_missing_session(store):
    assert store.push_message("nope", "hej") is False
    assert store.drain_messages("nope") == []


def test_messages_gone_after_destroy(store):
    session_id = store.create(None)
    store.push_message(session_id, "hej")
    store.destroy(session_id)

    assert store.push_message(session_id, "znowu") is False
    assert store.drain_messages(session_id) == []


def test_purge_expired(store, clock):
    old = store.create(1)
    clock.advance(10)
    fresh = store.create(2)
    clock.advance(10)

    assert store.purge_expired() == 1
    assert store.get(old) is None
    assert store.get(fresh) is not None


def test_ttl_must_be_positive(clock):
    with pytest.raises(ValueError):
        SessionStore(ttl_seconds=0, clock=clock)


def test_concurrent_pushes_are_not_lost(store):
    session_id = store.create(None)
    other_id = store.create(None)

    def push(target, prefix):
        for i in range(200):
            store.push_message(target, f"{prefix}{i}")

    threads = [threading.Thread(target=push, args=(session_id, f"t{n}-")) for n in range(4)]
    threads.append(threading.Thread(target=push, args=(other_id, "x-")))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.drain_messages(session_id)) == 800
    assert len(store.drain_messages(other_id)) == 200
