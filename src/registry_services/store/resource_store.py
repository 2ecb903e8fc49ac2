"""
registry_services.store.resource_store

Generic thread-safe keyed collection with auto-incrementing identifiers.

Responsibilities:
- Allocate strictly increasing identifiers (never reused) per store instance.
- Stamp creation time and store records atomically with the counter bump.
- Serve lookups and scans under a shared lock; writes under an exclusive lock.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Generic, Protocol, TypeVar

from registry_services.store.rwlock import ReadWriteLock


class Record(Protocol):
    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Record)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


class ResourceStore(Generic[T]):
    """
    Owns its collection and lock; neither is exposed to callers.

    Records are expected to be immutable, so returning the stored reference is
    equivalent to returning a copy. Callbacks passed to `create`, `list_where`
    and `replace` run inside the lock and must not block or touch this store.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._records: dict[int, T] = {}
        self._next_id = 1

    def create(self, build: Callable[[int, datetime], T]) -> T:
        with self._lock.write_locked():
            record = build(self._next_id, _utcnow())
            self._records[self._next_id] = record
            self._next_id += 1
        return record

    def get(self, record_id: int) -> T | None:
        # Absence is a normal outcome, signalled with None.
        with self._lock.read_locked():
            return self._records.get(record_id)

    def list_all(self) -> list[T]:
        # Insertion order today; callers must not rely on it.
        with self._lock.read_locked():
            return list(self._records.values())

    def list_where(self, predicate: Callable[[T], bool]) -> list[T]:
        with self._lock.read_locked():
            return [r for r in self._records.values() if predicate(r)]

    def replace(self, record_id: int, change: Callable[[T], T]) -> bool:
        with self._lock.write_locked():
            current = self._records.get(record_id)
            if current is None:
                return False
            self._records[record_id] = change(current)
        return True

    @property
    def next_id(self) -> int:
        with self._lock.read_locked():
            return self._next_id

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._records)
