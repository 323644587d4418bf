# src/netrate/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the components that operate on the shared store:
catalog, rate tables, resolver, network directory, provider registry,
logical clock and resolution statistics.
"""

from netrate.application.clock import LedgerClock
from netrate.application.network_directory import NetworkDirectory
from netrate.application.provider_registry import ProviderRegistry
from netrate.application.rate_resolver import RateResolver, window_contains
from netrate.application.rate_store import RateStore
from netrate.application.service_catalog import ServiceCatalog
from netrate.application.stats import ResolutionStats

__all__ = [
    "ServiceCatalog",
    "RateStore",
    "RateResolver",
    "window_contains",
    "LedgerClock",
    "NetworkDirectory",
    "ProviderRegistry",
    "ResolutionStats",
]
