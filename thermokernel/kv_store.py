"""Key-value stores addressed by generated keys of the form ``prefix_id``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

V = TypeVar("V")

_U64_LIMIT = 1 << 64


class KvStore(ABC, Generic[V]):
    """Store values under generated string keys of the form ``prefix_id``."""

    @abstractmethod
    def insert(self, value: V) -> str:
        """Store ``value`` and return the key generated for it."""

    @abstractmethod
    def get(self, key: str) -> V | None:
        """Return the value stored under ``key``, or ``None``."""

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Remove the value under ``key``; return whether one was removed."""


def _parse_id(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    number = int(digits)
    return number if number < _U64_LIMIT else None


class PrefixedKvStore(KvStore[V]):
    """A store that numbers its entries sequentially under a fixed prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self.map: dict[int, V] = {}
        self._next_id = 0

    def _parse_key(self, key: str) -> int | None:
        prefix, sep, id_part = key.rpartition("_")
        if not sep or prefix != self.prefix:
            return None
        return _parse_id(id_part)

    def insert(self, value: V) -> str:
        entry_id = self._next_id
        self._next_id += 1
        self.map[entry_id] = value
        return f"{self.prefix}_{entry_id}"

    def get(self, key: str) -> V | None:
        entry_id = self._parse_key(key)
        if entry_id is None:
            return None
        return self.map.get(entry_id)

    def remove(self, key: str) -> bool:
        entry_id = self._parse_key(key)
        if entry_id is None or entry_id not in self.map:
            return False
        del self.map[entry_id]
        return True

    def __len__(self) -> int:
        return len(self.map)