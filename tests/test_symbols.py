"""Tests for the linear-probing symbol table."""

import pytest

from symbols import DEFAULT_CAPACITY, SymbolTable, string_hash


def test_empty_table():
    table = SymbolTable()
    assert table.size() == 0
    assert table.capacity() == DEFAULT_CAPACITY
    assert table.is_empty()
    assert table.find("a") is None
    assert not table.contains("a")


def test_add_find_and_overwrite():
    table = SymbolTable()
    table.add("a", 1)
    table.add("b", 2)
    assert table.find("a") == 1
    assert table.find("b") == 2

    table.add("a", 10)
    assert table.find("a") == 10
    assert table.size() == 2
    assert len(table) == 2
    assert "a" in table and "c" not in table


def test_zero_is_a_stored_value():
    table = SymbolTable()
    table.add("z", 0)
    assert table.find("z") == 0
    assert table.contains("z")


def test_string_hash_is_deterministic():
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("ab") == 97 * 31 + 98
    assert string_hash("hello") == 99162322
    assert string_hash("a" * 50) >= 0

    table = SymbolTable()
    assert table.hash("a") == 97 % DEFAULT_CAPACITY


def test_capacity_doubles_before_passing_half_full():
    table = SymbolTable(capacity=4)
    table.add("a", 1)
    table.add("b", 2)
    assert table.capacity() == 4
    table.add("c", 3)
    assert table.capacity() == 8
    assert [table.find(k) for k in "abc"] == [1, 2, 3]


def test_overwrite_does_not_grow():
    table = SymbolTable(capacity=4)
    table.add("a", 1)
    table.add("b", 2)
    table.add("b", 3)
    assert table.capacity() == 4
    assert table.size() == 2


def test_many_keys_stay_reachable_after_growth():
    table = SymbolTable()
    for i in range(200):
        table.add(f"v{i}", i)
        assert 2 * table.size() <= table.capacity()

    assert table.size() == 200
    assert table.capacity() == 512
    assert all(table.find(f"v{i}") == i for i in range(200))


def test_remove_repairs_probe_chain():
    # Every key collides, so they sit in one run starting at slot 0.
    table = SymbolTable(hash_function=lambda key: 0)
    for i, key in enumerate("abcd"):
        table.add(key, i)

    table.remove("b")
    assert not table.contains("b")
    assert table.size() == 3
    assert [table.find(k) for k in "acd"] == [0, 2, 3]
    assert list(table) == ["a", "c", "d"]


def test_remove_repairs_chain_that_wraps_around():
    table = SymbolTable(capacity=8, hash_function=lambda key: 7)
    table.add("x", 1)
    table.add("y", 2)
    table.add("z", 3)
    assert list(table) == ["y", "z", "x"]

    table.remove("x")
    assert table.find("x") is None
    assert table.find("y") == 2
    assert table.find("z") == 3
    assert list(table) == ["z", "y"]


def test_remove_with_mixed_home_slots():
    homes = {"a": 1, "b": 1, "c": 2, "d": 5}
    table = SymbolTable(capacity=8, hash_function=homes.__getitem__)
    for key in "abcd":
        table.add(key, ord(key))

    table.remove("a")
    assert not table.contains("a")
    for key in "bcd":
        assert table.find(key) == ord(key)


def test_remove_missing_key_is_a_no_op():
    table = SymbolTable()
    table.add("a", 1)
    table.remove("nope")
    assert table.size() == 1
    assert table.find("a") == 1


def test_remove_then_add_again():
    table = SymbolTable()
    table.add("a", 1)
    table.remove("a")
    assert table.is_empty()
    table.add("a", 2)
    assert table.find("a") == 2
    assert table.size() == 1


def test_items_and_dump():
    table = SymbolTable(capacity=4, hash_function=lambda key: 1)
    table.add("a", 5)
    assert dict(table.items()) == {"a": 5}
    assert table.dump().splitlines() == ["0: ", "1: a = 5", "2: ", "3: "]


def test_clear():
    table = SymbolTable(capacity=2)
    for key in "abcde":
        table.add(key, 1)
    table.clear()
    assert table.size() == 0
    assert table.capacity() == DEFAULT_CAPACITY
    assert table.find("a") is None


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        SymbolTable(capacity=0)
