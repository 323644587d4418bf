# src/netrate/app.py
"""
Application Entry Point - Engine Composition Root

This module wires all components over one shared store and exposes them
as a NetworkPricing engine. The embedding system supplies logical time by
moving the engine's clock; rate writes and resolutions made through the
engine use the clock's current height.

Files that USE this module:
- Embedding applications (build_network_pricing)
- tests.test_app (end-to-end scenarios)

Files that this module USES:
- netrate.config (settings for clock start, window enforcement and logging)
- netrate.shared.logging_conf (setup_logging for logging configuration)
- netrate.adapters.persistence.memory_store (KeyValueStore)
- netrate.application.* (all components)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
from dataclasses import dataclass  # Container for the wired components
from typing import Optional  # Type hints for optional values

from netrate.adapters.persistence.memory_store import KeyValueStore  # Shared keyed tables
from netrate.application.clock import LedgerClock  # Logical time source
from netrate.application.network_directory import NetworkDirectory  # Networks and memberships
from netrate.application.provider_registry import ProviderRegistry  # Providers and credentials
from netrate.application.rate_resolver import RateResolver  # Effective rate precedence
from netrate.application.rate_store import RateStore  # Rate tables
from netrate.application.service_catalog import ServiceCatalog  # Service code registry
from netrate.application.stats import ResolutionStats  # Resolution outcome counters
from netrate.config import Settings  # Configuration model
from netrate.domain.models import LogicalTime, ResolvedRate  # Domain types
from netrate.domain.results import Result  # Operation outcomes
from netrate.shared.logging_conf import setup_logging  # Configure logging with file rotation

logger = logging.getLogger(__name__)


@dataclass
class NetworkPricing:
    """All engine components sharing one store and one clock."""
    store: KeyValueStore
    clock: LedgerClock
    catalog: ServiceCatalog
    rates: RateStore
    resolver: RateResolver
    directory: NetworkDirectory
    registry: ProviderRegistry
    stats: ResolutionStats

    def set_provider_rate(
        self,
        network_id: str,
        provider_id: str,
        code: str,
        rate: int,
        effective_date: LogicalTime,
        expiry_date: LogicalTime,
    ) -> Result:
        """Set a provider rate, stamping the negotiated date with the clock height."""
        return self.rates.set_provider_rate(
            network_id, provider_id, code, rate, effective_date, expiry_date, now=self.clock.height
        )

    def add_provider_to_network(self, network_id: str, provider_id: str, tier: str) -> Result:
        """Add a provider to a network, joining at the clock height."""
        return self.directory.add_provider_to_network(network_id, provider_id, tier, now=self.clock.height)

    def effective_rate(self, network_id: str, provider_id: str, code: str) -> Optional[int]:
        """Resolve the effective rate at the clock height."""
        return self.resolver.get_effective_rate(network_id, provider_id, code, now=self.clock.height)

    def resolve(self, network_id: str, provider_id: str, code: str) -> Optional[ResolvedRate]:
        """Resolve at the clock height, reporting which scope matched."""
        return self.resolver.resolve(network_id, provider_id, code, now=self.clock.height)


def build_network_pricing(
    config: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    configure_logging: bool = False,
) -> NetworkPricing:
    """
    Build an engine with every component wired to one store.

    Args:
        config: Settings to use (defaults to the module-level settings)
        store: Existing store to reuse (defaults to a new empty store)
        configure_logging: Whether to call setup_logging from the settings

    Returns:
        NetworkPricing engine with its clock at config.genesis_height
    """
    if config is None:
        from netrate.config import settings
        config = settings

    if configure_logging:
        setup_logging(
            level=config.log_level,
            log_file=config.log_file,
            log_dir=config.log_dir,
            log_stdout=config.log_stdout,
            max_bytes=config.log_max_bytes,
            backup_count=config.log_backup_count,
        )

    if store is None:
        store = KeyValueStore()

    catalog = ServiceCatalog(store)
    rates = RateStore(store, catalog, enforce_windows=config.enforce_rate_windows)
    stats = ResolutionStats()
    engine = NetworkPricing(
        store=store,
        clock=LedgerClock(config.genesis_height),
        catalog=catalog,
        rates=rates,
        resolver=RateResolver(rates, stats=stats),
        directory=NetworkDirectory(store),
        registry=ProviderRegistry(store),
        stats=stats,
    )
    logger.info(
        "Network pricing engine ready (height=%s, enforce_rate_windows=%s)",
        engine.clock.height, config.enforce_rate_windows,
    )
    return engine
