# File: tests/unit/test_event_store.py
"""
Unit tests for the in-memory EventStore.
"""

import pytest
from unittest.mock import Mock

from src.core.event_store import EventStore


class TestEventStore:
    """Tests for EventStore mutations and notifications."""

    def test_add_appends_in_order(self, make_event):
        store = EventStore()
        a, b = make_event(title="A"), make_event(title="B")

        assert store.add(a) is True
        assert store.add(b) is True
        assert [e.title for e in store] == ["A", "B"]
        assert len(store) == 2

    def test_add_existing_id_is_noop(self, make_event):
        store = EventStore()
        event = make_event(id="same")
        store.add(event)

        assert store.add(make_event(title="Other", id="same")) is False
        assert len(store) == 1
        assert store.get("same").title == "Piano"

    def test_update_replaces_in_place(self, make_event):
        first, second = make_event(title="A", id="a"), make_event(title="B", id="b")
        store = EventStore([first, second])

        assert store.update(first.copy(title="A2")) is True
        assert [e.title for e in store] == ["A2", "B"]

    def test_update_missing_is_noop(self, make_event):
        store = EventStore()
        assert store.update(make_event()) is False
        assert len(store) == 0

    def test_delete(self, make_event):
        event = make_event(id="x")
        store = EventStore([event])

        assert store.delete("x") is True
        assert store.delete("x") is False
        assert store.contains("x") is False

    def test_replace_all_discards_previous(self, five_events, make_event):
        store = EventStore(five_events)
        new = [make_event(title="N1"), make_event(title="N2")]

        store.replace_all(new)

        assert [e.title for e in store] == ["N1", "N2"]

    def test_replace_all_rejects_duplicate_ids(self, five_events, make_event):
        store = EventStore(five_events)

        with pytest.raises(ValueError, match="Duplicate event id"):
            store.replace_all([make_event(id="d"), make_event(id="d")])
        assert store.events == five_events

    def test_constructor_rejects_duplicate_ids(self, make_event):
        with pytest.raises(ValueError):
            EventStore([make_event(id="d"), make_event(id="d")])

    def test_events_is_a_copy(self, make_event):
        store = EventStore([make_event()])
        store.events.clear()
        assert len(store) == 1

    def test_listeners_receive_full_snapshot(self, make_event):
        store = EventStore()
        listener = Mock()
        store.subscribe(listener)

        a = make_event(title="A", id="a")
        store.add(a)
        store.update(a.copy(title="A2"))
        store.delete("a")

        assert listener.call_count == 3
        assert [e.title for e in listener.call_args_list[1][0][0]] == ["A2"]
        assert listener.call_args_list[2][0][0] == []

    def test_noop_mutations_do_not_notify(self, make_event):
        store = EventStore([make_event(id="a")])
        listener = Mock()
        store.subscribe(listener)

        store.add(make_event(id="a"))
        store.update(make_event(id="missing"))
        store.delete("missing")

        listener.assert_not_called()
