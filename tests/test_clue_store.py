import pytest

from clue_store import ClueStore, enumerate_in_order, insert


SAMPLES = [
    ["b", "a", "c"],
    ["a", "b", "c", "d"],
    ["d", "c", "b", "a"],
    ["Zebra", "apple", "Apple", "zebra"],
    ["Página", "Pegadas", "Chave", "Copo"],
]


@pytest.mark.parametrize("clues", SAMPLES)
def test_in_order_is_strictly_ascending(clues):
    store = ClueStore()
    for clue in clues:
        store.insert(clue)
    ordered = store.in_order()
    assert ordered == sorted(set(clues))
    assert all(a < b for a, b in zip(ordered, ordered[1:]))


def test_order_matches_utf8_byte_order():
    store = ClueStore()
    for clue in ["Página arrancada", "Pegadas de lama", "Retrato"]:
        store.insert(clue)
    expected = sorted(store.in_order(), key=lambda c: c.encode("utf-8"))
    assert store.in_order() == expected
    assert store.in_order()[:2] == ["Pegadas de lama", "Página arrancada"]


def test_duplicate_insert_is_a_no_op():
    store = ClueStore()
    assert store.insert("Copo quebrado") is True
    before = store.in_order()
    assert store.insert("Copo quebrado") is False
    assert store.in_order() == before
    assert len(store) == 1


def test_duplicates_are_case_sensitive():
    store = ClueStore()
    store.insert("chave")
    store.insert("Chave")
    assert store.in_order() == ["Chave", "chave"]


def test_empty_clue_is_ignored():
    store = ClueStore()
    assert store.insert("") is False
    assert store.root is None
    assert len(store) == 0
    assert list(store) == []


def test_module_insert_returns_root_and_never_rebalances():
    root = None
    for clue in ["a", "b", "c", "d"]:
        root = insert(root, clue)
    assert root.clue == "a"
    assert root.left is None
    assert list(enumerate_in_order(root)) == ["a", "b", "c", "d"]


def test_height_and_contains():
    store = ClueStore()
    for clue in ["m", "f", "t", "a"]:
        store.insert(clue)
    assert store.height() == 3
    assert "f" in store
    assert "z" not in store
    assert 42 not in store


def test_clear_empties_the_store():
    store = ClueStore()
    store.insert("x")
    store.clear()
    assert store.in_order() == []
    assert len(store) == 0
