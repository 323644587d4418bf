# src/netrate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters for external systems:
- Persistence (storage)
"""

__all__ = []
