"""Tests for the named value registry."""

from kv_hooks.registry import Registry


def test_get_missing_is_none():
    assert Registry({}).get("x") is None


def test_set_then_get():
    entries = {}
    registry = Registry(entries)

    registry.set("color", "blue")

    assert registry.get("color") == "blue"
    assert entries == {"color": "blue"}


def test_set_is_idempotent():
    """Test setting the same value twice equals setting it once."""
    once = Registry({})
    once.set("k", "v")
    twice = Registry({})
    twice.set("k", "v")
    twice.set("k", "v")

    assert once.entries == twice.entries


def test_set_overwrites():
    registry = Registry({"k": "old"})

    registry.set("k", "new")

    assert registry.get("k") == "new"


def test_delete_returns_value():
    registry = Registry({"k": "v", "other": "x"})

    assert registry.delete("k") == "v"
    assert registry.entries == {"other": "x"}


def test_delete_missing_leaves_entries():
    """Test deleting an absent name returns None and changes nothing."""
    registry = Registry({"k": "v"})

    assert registry.delete("x") is None
    assert registry.entries == {"k": "v"}


def test_items_sorted():
    registry = Registry({"b": "2", "a": "1", "c": "3"})

    assert list(registry.items()) == [("a", "1"), ("b", "2"), ("c", "3")]
