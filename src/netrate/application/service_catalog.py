# src/netrate/application/service_catalog.py
"""
Service Catalog - Registry of Valid Service Codes

Service codes are registered once and never changed or removed. The
catalog is the existence gate for every rate write.

Files that USE this module:
- netrate.application.rate_store (has_code gate before storing rates)
- netrate.app (wires the catalog into the engine)

Files that this module USES:
- netrate.adapters.persistence.memory_store (KeyValueStore tables)
- netrate.domain (ServiceCode, Result, ErrorCode)
"""
from __future__ import annotations

import logging
from typing import Optional

from netrate.adapters.persistence.memory_store import KeyValueStore
from netrate.domain.errors import ErrorCode
from netrate.domain.models import ServiceCode
from netrate.domain.results import Result

logger = logging.getLogger(__name__)

SERVICE_CODES_TABLE = "service_codes"


class ServiceCatalog:
    """Create-once registry of service codes."""

    def __init__(self, store: KeyValueStore):
        """
        Initialize the catalog over a shared store.

        Args:
            store: Store holding the service code table
        """
        self._codes = store.table(SERVICE_CODES_TABLE)

    def add_code(self, code: str, description: str, category: str) -> Result:
        """
        Register a new service code.

        Not idempotent: a second registration of the same code is rejected
        regardless of the description and category supplied.

        Args:
            code: Service code identifier
            description: Human readable description
            category: Service category

        Returns:
            Result.success(), or a failure with ErrorCode.CODE_EXISTS
        """
        entry = ServiceCode(code=code, description=description, category=category)
        if not self._codes.insert((code,), entry):
            logger.warning("Service code %s already registered", code)
            return Result.failure(ErrorCode.CODE_EXISTS)

        logger.info("Registered service code %s (%s)", code, category)
        return Result.success()

    def get_code(self, code: str) -> Optional[ServiceCode]:
        """Return the registered ServiceCode, or None if unknown."""
        return self._codes.get((code,))

    def has_code(self, code: str) -> bool:
        """Return True if the service code is registered."""
        return self._codes.contains((code,))
