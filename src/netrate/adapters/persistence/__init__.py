# src/netrate/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for holding keyed records:
- In-memory tables with striped per-key locking
"""

from netrate.adapters.persistence.memory_store import KeyValueStore, Table

__all__ = [
    "KeyValueStore",
    "Table",
]
