# src/netrate/application/rate_store.py
"""
Rate Store - Negotiated Rate Tables

Holds two independent rate tables, each entry carrying a half-open
validity window:
- Default network rates keyed by (network_id, code)
- Provider-specific rates keyed by (network_id, provider_id, code)

Writes are upserts: a set for an existing key fully replaces the entry and
no history is kept. The only precondition is that the service code exists
in the catalog. Network and provider existence are not checked, and window
ordering is only checked when enforce_windows is enabled.

Files that USE this module:
- netrate.application.rate_resolver (reads both tables at query time)
- netrate.app (wires the store into the engine)

Files that this module USES:
- netrate.application.service_catalog (code existence gate)
- netrate.adapters.persistence.memory_store (KeyValueStore tables)
- netrate.domain (RateEntry, ProviderRate, Result, errors)
- netrate.shared.validators (argument guards)
"""
from __future__ import annotations

import logging
from typing import Optional

from netrate.adapters.persistence.memory_store import KeyValueStore, Table
from netrate.application.service_catalog import ServiceCatalog
from netrate.domain.errors import ErrorCode, InvalidLogicalTimeError, InvalidRateError
from netrate.domain.models import LogicalTime, ProviderRate, RateEntry
from netrate.domain.results import Result
from netrate.shared.validators import validate_logical_time, validate_rate_amount, validate_window

logger = logging.getLogger(__name__)

DEFAULT_RATES_TABLE = "default_network_rates"
PROVIDER_RATES_TABLE = "provider_rates"


def _check_rate(rate: int) -> None:
    if not validate_rate_amount(rate):
        raise InvalidRateError(f"Rate must be a non-negative integer in minor units, got {rate!r}")


def _check_time(name: str, value: LogicalTime) -> None:
    if not validate_logical_time(value):
        raise InvalidLogicalTimeError(f"{name} must be a non-negative integer, got {value!r}")


class RateStore:
    """Owner of the default network and provider-specific rate tables."""

    def __init__(self, store: KeyValueStore, catalog: ServiceCatalog, enforce_windows: bool = False):
        """
        Initialize the rate tables over a shared store.

        Args:
            store: Store holding both rate tables
            catalog: Catalog used as the service code existence gate
            enforce_windows: Reject windows where effective_date >= expiry_date
        """
        self._catalog = catalog
        self._default_rates = store.table(DEFAULT_RATES_TABLE)
        self._provider_rates = store.table(PROVIDER_RATES_TABLE)
        self.enforce_windows = enforce_windows

    def _upsert(self, table: Table, key: tuple, code: str, entry: RateEntry) -> Result:
        # Existence check and replace run under the rate key's lock
        with table.locked(key):
            if not self._catalog.has_code(code):
                logger.warning("Rejected rate for unknown service code %s (key=%s)", code, key)
                return Result.failure(ErrorCode.CODE_NOT_FOUND)
            if self.enforce_windows and not validate_window(entry.effective_date, entry.expiry_date):
                logger.warning(
                    "Rejected empty validity window [%s, %s) for key=%s",
                    entry.effective_date, entry.expiry_date, key,
                )
                return Result.failure(ErrorCode.INVALID_WINDOW)
            table.put(key, entry)

        logger.info(
            "Set %s rate=%s window=[%s, %s) key=%s",
            table.name, entry.rate, entry.effective_date, entry.expiry_date, key,
        )
        return Result.success()

    def set_default_network_rate(
        self,
        network_id: str,
        code: str,
        rate: int,
        effective_date: LogicalTime,
        expiry_date: LogicalTime,
    ) -> Result:
        """
        Set or replace the default rate for a service code in a network.

        Args:
            network_id: Network the rate applies to
            code: Registered service code
            rate: Price in currency minor units
            effective_date: First logical time the rate applies (inclusive)
            expiry_date: Logical time the rate stops applying (exclusive)

        Returns:
            Result.success(), or a failure with ErrorCode.CODE_NOT_FOUND
            (or ErrorCode.INVALID_WINDOW when windows are enforced)

        Raises:
            InvalidRateError: If rate is not a non-negative integer
            InvalidLogicalTimeError: If a date is not a non-negative integer
        """
        _check_rate(rate)
        _check_time("effective_date", effective_date)
        _check_time("expiry_date", expiry_date)

        entry = RateEntry(rate=rate, effective_date=effective_date, expiry_date=expiry_date)
        return self._upsert(self._default_rates, (network_id, code), code, entry)

    def set_provider_rate(
        self,
        network_id: str,
        provider_id: str,
        code: str,
        rate: int,
        effective_date: LogicalTime,
        expiry_date: LogicalTime,
        now: LogicalTime,
    ) -> Result:
        """
        Set or replace a provider-specific rate.

        The negotiated date is stamped with now, the logical time of this
        call, independent of the validity window.

        Args:
            network_id: Network the rate applies to
            provider_id: Provider the rate was negotiated with
            code: Registered service code
            rate: Price in currency minor units
            effective_date: First logical time the rate applies (inclusive)
            expiry_date: Logical time the rate stops applying (exclusive)
            now: Current logical time

        Returns:
            Result.success(), or a failure with ErrorCode.CODE_NOT_FOUND
            (or ErrorCode.INVALID_WINDOW when windows are enforced)

        Raises:
            InvalidRateError: If rate is not a non-negative integer
            InvalidLogicalTimeError: If a date or now is not a non-negative integer
        """
        _check_rate(rate)
        _check_time("effective_date", effective_date)
        _check_time("expiry_date", expiry_date)
        _check_time("now", now)

        entry = ProviderRate(
            rate=rate,
            effective_date=effective_date,
            expiry_date=expiry_date,
            negotiated_date=now,
        )
        return self._upsert(self._provider_rates, (network_id, provider_id, code), code, entry)

    def get_default_network_rate(self, network_id: str, code: str) -> Optional[RateEntry]:
        """Return the default network rate entry, or None if never set."""
        return self._default_rates.get((network_id, code))

    def get_provider_rate(self, network_id: str, provider_id: str, code: str) -> Optional[ProviderRate]:
        """Return the provider-specific rate entry, or None if never set."""
        return self._provider_rates.get((network_id, provider_id, code))

    def has_code(self, code: str) -> bool:
        """Return True if the service code is registered in the catalog."""
        return self._catalog.has_code(code)
