# src/netrate/application/rate_resolver.py
"""
Rate Resolver - Effective Rate Computation

Determines which negotiated rate applies for a network, provider and
service code at a given logical time.

Precedence (first match wins):
1. Provider-specific rate whose window contains now
2. Default network rate whose window contains now
3. No applicable rate (None, which is distinct from a rate of zero)

Scope always decides: a live provider rate beats a live network rate even
when the network window is narrower or more recent. Windows are half-open,
so now == effective_date is inside and now == expiry_date is outside.

Files that USE this module:
- netrate.app (exposes effective rate lookups)

Files that this module USES:
- netrate.application.rate_store (read-only access to both rate tables)
- netrate.application.stats (optional outcome counters)
- netrate.domain (RateEntry, ResolvedRate, InvalidLogicalTimeError)
- netrate.shared.validators (logical time guard)
"""
from __future__ import annotations

import logging
from typing import Optional

from netrate.application.rate_store import RateStore
from netrate.application.stats import SOURCE_NETWORK, SOURCE_NONE, SOURCE_PROVIDER, ResolutionStats
from netrate.domain.errors import InvalidLogicalTimeError
from netrate.domain.models import LogicalTime, RateEntry, ResolvedRate
from netrate.shared.validators import validate_logical_time

logger = logging.getLogger(__name__)


def window_contains(entry: RateEntry, now: LogicalTime) -> bool:
    """Return True if now lies in [entry.effective_date, entry.expiry_date)."""
    return entry.effective_date <= now < entry.expiry_date


class RateResolver:
    """Stateless precedence resolver over a RateStore."""

    def __init__(self, rates: RateStore, stats: Optional[ResolutionStats] = None):
        """
        Initialize the resolver.

        Args:
            rates: Rate tables to read from
            stats: Optional tracker that counts resolution outcomes
        """
        self._rates = rates
        self._stats = stats

    def _record(self, code: str, source: str) -> None:
        if self._stats is None:
            return
        # Misses on unregistered codes only reach the totals
        track_code = source != SOURCE_NONE or self._rates.has_code(code)
        self._stats.record(code, source, track_code=track_code)

    def resolve(
        self, network_id: str, provider_id: str, code: str, now: LogicalTime
    ) -> Optional[ResolvedRate]:
        """
        Resolve the applicable rate and report which scope supplied it.

        Args:
            network_id: Network to price in
            provider_id: Provider delivering the service
            code: Service code
            now: Logical time to evaluate validity windows at

        Returns:
            ResolvedRate, or None if no rate applies at now

        Raises:
            InvalidLogicalTimeError: If now is not a non-negative integer
        """
        if not validate_logical_time(now):
            raise InvalidLogicalTimeError(f"now must be a non-negative integer, got {now!r}")

        provider_rate = self._rates.get_provider_rate(network_id, provider_id, code)
        if provider_rate is not None and window_contains(provider_rate, now):
            logger.debug("Provider rate %s for %s/%s/%s at %s", provider_rate.rate, network_id, provider_id, code, now)
            self._record(code, SOURCE_PROVIDER)
            return ResolvedRate(rate=provider_rate.rate, source=SOURCE_PROVIDER, entry=provider_rate)

        network_rate = self._rates.get_default_network_rate(network_id, code)
        if network_rate is not None and window_contains(network_rate, now):
            logger.debug("Network rate %s for %s/%s/%s at %s", network_rate.rate, network_id, provider_id, code, now)
            self._record(code, SOURCE_NETWORK)
            return ResolvedRate(rate=network_rate.rate, source=SOURCE_NETWORK, entry=network_rate)

        logger.debug("No applicable rate for %s/%s/%s at %s", network_id, provider_id, code, now)
        self._record(code, SOURCE_NONE)
        return None

    def get_effective_rate(
        self, network_id: str, provider_id: str, code: str, now: LogicalTime
    ) -> Optional[int]:
        """
        Get the effective rate in currency minor units.

        Returns:
            The rate, or None if no rate applies (never 0 as a stand-in)
        """
        resolved = self.resolve(network_id, provider_id, code, now)
        return resolved.rate if resolved is not None else None
