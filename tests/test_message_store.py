import itertools

import pytest

from message_board.services import MessageStore, MissingFieldError


def test_new_store_is_empty(store):
    assert store.list() == []
    assert len(store) == 0


def test_add_returns_message_shape(store):
    msg = store.add("hi", "Alice")

    assert set(msg) == {"id", "text", "senderName", "timestamp"}
    assert isinstance(msg["id"], str)
    assert msg["text"] == "hi"
    assert msg["senderName"] == "Alice"
    assert isinstance(msg["timestamp"], int)


def test_list_keeps_insertion_order(store):
    created = [store.add(f"message {i}", "Bob") for i in range(5)]

    assert store.list() == created
    assert len(store) == 5


def test_list_returns_a_snapshot(store):
    store.add("first", "Alice")
    snapshot = store.list()
    snapshot.clear()

    assert len(store.list()) == 1


@pytest.mark.parametrize("text, sender", [
    ("", "Bob"),
    ("hi", ""),
    (None, "Bob"),
    ("hi", None),
    (42, "Bob"),
])
def test_add_rejects_missing_fields(store, text, sender):
    with pytest.raises(MissingFieldError) as exc_info:
        store.add(text, sender)

    assert "text" in str(exc_info.value)
    assert "senderName" in str(exc_info.value)
    assert store.list() == []


def test_missing_field_error_is_value_error():
    assert issubclass(MissingFieldError, ValueError)


def test_same_clock_tick_gets_distinct_ids():
    store = MessageStore(clock=lambda: 1_700_000_000_000_000_000)

    first = store.add("a", "Alice")
    second = store.add("b", "Alice")

    assert first["id"] != second["id"]
    assert first["timestamp"] <= second["timestamp"]


def test_timestamps_do_not_go_backwards_with_clock():
    ticks = itertools.chain(
        [1_700_000_005_000_000_000, 1_700_000_001_000_000_000],
        itertools.count(1_700_000_002_000_000_000),
    )
    store = MessageStore(clock=lambda: next(ticks))

    first = store.add("a", "Alice")
    second = store.add("b", "Bob")

    assert second["timestamp"] >= first["timestamp"]
    assert int(second["id"]) > int(first["id"])


def test_timestamp_is_milliseconds():
    store = MessageStore(clock=lambda: 1_700_000_000_123_456_789)

    msg = store.add("hi", "Alice")

    assert msg["timestamp"] == 1_700_000_000_123
    assert msg["id"] == "1700000000123456789"


def test_whitespace_only_fields_are_accepted(store):
    msg = store.add("   ", "\t")

    assert msg["text"] == "   "
    assert msg["senderName"] == "\t"
    assert store.list() == [msg]
