# src/netrate/adapters/persistence/memory_store.py
"""
Memory Store - Keyed Record Storage

This module holds every logical table (catalog, default rates, provider
rates, networks, memberships, providers, credentials) in one explicit store
object that is passed by reference into each component. There is no
process-wide store instance.

Each table maps a tuple key to a record. Tuple keys keep differently
shaped keys from colliding, e.g. ("n1", "p1-99213") and ("n1-p1", "99213").

Mutations of one key are serialized through the lock of the stripe the
key hashes to, so a check-then-write sequence (existence check followed
by full replace) runs atomically for that key. The stripe count is fixed
per table, so rejected writes to ever-new keys allocate nothing.

Files that USE this module:
- netrate.application.* (every component reads and writes its tables here)
- netrate.app (creates the shared store)

Files that this module USES:
- None (standard library only)
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

Key = Tuple[Hashable, ...]

DEFAULT_LOCK_STRIPES = 64


class Table:
    """A single mapping from tuple keys to immutable records."""

    def __init__(self, name: str, lock_stripes: int = DEFAULT_LOCK_STRIPES):
        """
        Initialize an empty table.

        Args:
            name: Table name, used in log messages
            lock_stripes: Number of locks keys are spread over
        """
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be at least 1")
        self.name = name
        self._rows: Dict[Key, Any] = {}
        self._locks: List[threading.RLock] = [threading.RLock() for _ in range(lock_stripes)]

    @staticmethod
    def _check_key(key: Key) -> None:
        if not isinstance(key, tuple):
            raise TypeError(f"Table keys must be tuples, got {type(key).__name__}")

    def _lock_for(self, key: Key) -> threading.RLock:
        return self._locks[hash(key) % len(self._locks)]

    @contextmanager
    def locked(self, key: Key) -> Iterator[None]:
        """
        Hold the lock for one key while a read-then-write sequence runs.

        Args:
            key: Tuple key to serialize access on
        """
        self._check_key(key)
        with self._lock_for(key):
            yield

    def get(self, key: Key) -> Optional[Any]:
        """
        Look up a record.

        Args:
            key: Tuple key

        Returns:
            The stored record, or None if the key was never written
        """
        self._check_key(key)
        return self._rows.get(key)

    def contains(self, key: Key) -> bool:
        self._check_key(key)
        return key in self._rows

    def put(self, key: Key, record: Any) -> None:
        """
        Store a record, replacing any existing record for the key.

        Args:
            key: Tuple key
            record: Record to store (full replacement, never merged)
        """
        with self.locked(key):
            self._rows[key] = record

    def insert(self, key: Key, record: Any) -> bool:
        """
        Store a record only if the key is absent.

        Args:
            key: Tuple key
            record: Record to store

        Returns:
            True if inserted, False if the key already held a record
        """
        with self.locked(key):
            if key in self._rows:
                return False
            self._rows[key] = record
            return True

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, key: Key) -> bool:
        return self.contains(key)


class KeyValueStore:
    """Collection of named tables shared by all engine components."""

    def __init__(self):
        self._tables: Dict[str, Table] = {}
        self._guard = threading.Lock()

    def table(self, name: str) -> Table:
        """
        Get a table by name, creating it empty on first use.

        Args:
            name: Table name

        Returns:
            The Table instance for this name
        """
        with self._guard:
            table = self._tables.get(name)
            if table is None:
                table = Table(name)
                self._tables[name] = table
                logger.debug("Created table %s", name)
            return table

    def table_sizes(self) -> Dict[str, int]:
        """Return the number of records held in each table."""
        with self._guard:
            return {name: len(table) for name, table in self._tables.items()}
