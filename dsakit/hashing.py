"""Hash tables with separate chaining and with quadratic open addressing."""

from __future__ import annotations

from typing import Any

__all__ = ["ChainedHashTable", "QuadraticProbingMap", "DELETED"]


class _Deleted:
    """Marker left in a probing slot whose entry was removed."""

    _instance: _Deleted | None = None

    def __new__(cls) -> _Deleted:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DELETED"


DELETED = _Deleted()


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError("capacity must be a positive integer")


class ChainedHashTable:
    """Hash table whose buckets are chains of (key, value) pairs.

    Inserting a key that is already present adds a further pair to its chain.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._table: list[list[tuple[int, Any]]] = [[] for _ in range(capacity)]

    def _bucket(self, key: int) -> list[tuple[int, Any]]:
        return self._table[key % self._capacity]

    def insert(self, key: int, value: Any) -> None:
        """Append the pair to the chain its key hashes to."""
        self._bucket(key).append((key, value))

    def delete(self, key: int) -> bool:
        """Remove the first pair with ``key``; return whether one was found."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                return True
        return False

    def buckets(self) -> list[list[tuple[int, Any]]]:
        """Return a copy of every chain, in bucket order."""
        return [list(bucket) for bucket in self._table]

    def __str__(self) -> str:
        lines = []
        for index, bucket in enumerate(self._table):
            chain = "".join(f"({key},{value})->" for key, value in bucket)
            lines.append(f"{index} : {chain}NULL")
        return "\n".join(lines)


class QuadraticProbingMap:
    """Open-addressing map that resolves collisions by quadratic probing.

    Probe ``i`` for a key looks at ``(hash + i*i) % capacity``. Removed entries
    leave a ``DELETED`` marker that a later insertion may reuse. Inserting a
    key that is found before any free slot leaves the stored value unchanged.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._size = 0
        self._slots: list[Any] = [None] * capacity

    def _probe(self, key: int):
        start = key % self._capacity
        for i in range(self._capacity + 1):
            yield (start + i * i) % self._capacity

    def insert(self, key: int, value: Any) -> None:
        """Store the pair in the first free or deleted slot along its probe path.

        Raises OverflowError when the probe path holds no usable slot.
        """
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is DELETED:
                self._slots[index] = (key, value)
                self._size += 1
                return
            if slot[0] == key:
                return
        raise OverflowError(f"no free slot for key {key}")

    def delete(self, key: int) -> bool:
        """Mark the slot holding ``key`` as deleted; return whether it was found."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return False
            if slot is not DELETED and slot[0] == key:
                self._slots[index] = DELETED
                self._size -= 1
                return True
        return False

    def get(self, key: int) -> Any:
        """Return the value stored for ``key``, or None when it is absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not DELETED and slot[0] == key:
                return slot[1]
        return None

    def slots(self) -> list[Any]:
        """Return every slot: None, DELETED, or a (key, value) pair."""
        return list(self._slots)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        lines = []
        for index, slot in enumerate(self._slots):
            if slot is None:
                text = "NULL"
            elif slot is DELETED:
                text = "(-1,-1)"
            else:
                text = f"{slot[0]}->{slot[1]}"
            lines.append(f"{index} : {text}")
        return "\n".join(lines)