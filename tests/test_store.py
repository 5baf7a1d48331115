"""
Menu store ordering, removal and clearing.
"""
import pytest

from chef_menu.errors import DuplicateEntryError
from chef_menu.store import MenuStore


def test_empty_store():
    store = MenuStore()
    assert store.count() == 0
    assert list(store) == []


def test_add_prepends_and_counts(make_entry):
    store = MenuStore().add(make_entry("a"))
    bigger = store.add(make_entry("b"))

    assert bigger.count() == store.count() + 1
    assert bigger.entries[0].id == "b"
    assert [entry.id for entry in bigger] == ["b", "a"]
    # The previous store value is untouched.
    assert [entry.id for entry in store] == ["a"]


def test_add_rejects_duplicate_id(make_entry):
    store = MenuStore().add(make_entry("a"))
    with pytest.raises(DuplicateEntryError):
        store.add(make_entry("a", name="Other"))


def test_scenario_remove_middle(make_entry):
    a, b, c = make_entry("a", "A"), make_entry("b", "B"), make_entry("c", "C")
    store = MenuStore().add(a).add(b).add(c)
    assert list(store) == [c, b, a]

    store = store.remove_by_id(b.id)
    assert list(store) == [c, a]


def test_remove_missing_id_is_noop(make_entry):
    store = MenuStore().add(make_entry("a")).add(make_entry("b"))
    after = store.remove_by_id("missing")

    assert after is store
    assert after.entries == store.entries


def test_clear_then_remove_former_id(make_entry):
    a, b, c = make_entry("a"), make_entry("b"), make_entry("c")
    store = MenuStore().add(a).add(b).add(c).remove_by_id(b.id)

    cleared = store.clear()
    assert cleared.count() == 0
    for entry in (a, b, c):
        assert cleared.remove_by_id(entry.id).count() == 0


def test_clear_empty_store():
    assert MenuStore().clear().count() == 0


def test_find(make_entry):
    entry = make_entry("x")
    store = MenuStore().add(entry)
    assert store.find("x") is entry
    assert store.find("y") is None
