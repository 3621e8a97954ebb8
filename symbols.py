"""Symbol table for expression variables.

This module defines `SymbolTable`, the store that maps variable names to the
integer last assigned to them. It is a hash table with open addressing:
keys and values live in two parallel slot lists, and collisions are resolved
by linear probing (scan forward, wrapping around, to the next slot that is
empty or holds the key).

The table keeps its load factor at or below 50%: before a new key is added
that would take it past half full, the capacity doubles and every entry is
rehashed. Removing a key clears its slot and then reinserts every entry in
the rest of that probe run, since any of them may have probed past the slot
that just became empty.

`SESSION` is the process-wide table used when a node is evaluated without an
explicit table.
"""

from __future__ import annotations
from typing import Callable, Iterator, List, Optional, Tuple

DEFAULT_CAPACITY = 16


def string_hash(key: str) -> int:
    """Deterministic polynomial string hash (31 multiplier), non-negative."""
    h = 0
    for ch in key:
        h = (31 * h + ord(ch)) & 0xFFFFFFFF
    return h & 0x7FFFFFFF


class SymbolTable:
    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        hash_function: Optional[Callable[[str], int]] = None,
    ):
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.hash_function = hash_function or string_hash
        self._keys: List[Optional[str]] = [None] * capacity
        self._values: List[Optional[int]] = [None] * capacity
        self._capacity = capacity
        self._size = 0

    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def hash(self, key: str) -> int:
        """Return the home slot of `key` for the current capacity."""
        return self.hash_function(key) % self._capacity

    def _increment(self, index: int) -> int:
        index += 1
        return index if index < self._capacity else 0

    def _locate(self, key: str) -> int:
        """Return the slot that holds `key`, or the empty slot where it would go."""
        index = self.hash(key)
        while self._keys[index] is not None and self._keys[index] != key:
            index = self._increment(index)
        return index

    def contains(self, key: str) -> bool:
        return self._keys[self._locate(key)] is not None

    def find(self, key: str) -> Optional[int]:
        """Return the value stored for `key`, or None if it was never added."""
        index = self._locate(key)
        if self._keys[index] is None:
            return None
        return self._values[index]

    def add(self, key: str, value: int) -> None:
        """Insert `key` or overwrite its value."""
        index = self._locate(key)
        if self._keys[index] == key:
            self._values[index] = value
            return

        # Grow first so that the load factor never exceeds one half.
        if 2 * (self._size + 1) > self._capacity:
            self._resize(2 * self._capacity)
            index = self._locate(key)

        self._keys[index] = key
        self._values[index] = value
        self._size += 1

    def remove(self, key: str) -> None:
        """Remove `key` if present and repair the probe run that follows it."""
        index = self._locate(key)
        if self._keys[index] is None:
            return
        self._keys[index] = None
        self._values[index] = None
        self._size -= 1

        i = self._increment(index)
        while self._keys[i] is not None:
            saved_key, saved_value = self._keys[i], self._values[i]
            self._keys[i] = None
            self._values[i] = None

            slot = self._locate(saved_key)
            self._keys[slot] = saved_key
            self._values[slot] = saved_value
            i = self._increment(i)

    def _resize(self, capacity: int) -> None:
        old_keys, old_values = self._keys, self._values
        self._keys = [None] * capacity
        self._values = [None] * capacity
        self._capacity = capacity

        for key, value in zip(old_keys, old_values):
            if key is not None:
                slot = self._locate(key)
                self._keys[slot] = key
                self._values[slot] = value

    def clear(self) -> None:
        """Drop every entry and go back to the default capacity."""
        self._keys = [None] * DEFAULT_CAPACITY
        self._values = [None] * DEFAULT_CAPACITY
        self._capacity = DEFAULT_CAPACITY
        self._size = 0

    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield (name, value) pairs in slot order."""
        for key, value in zip(self._keys, self._values):
            if key is not None:
                yield key, value

    def dump(self) -> str:
        """Render every slot of the table, one `index: key = value` per line."""
        lines = []
        for i, (key, value) in enumerate(zip(self._keys, self._values)):
            if key is None:
                lines.append(f"{i}: ")
            else:
                lines.append(f"{i}: {key} = {value}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __repr__(self) -> str:
        entries = ", ".join(f"{k}={v}" for k, v in self.items())
        return f"SymbolTable({entries})"


SESSION = SymbolTable()
