# src/netrate/application/stats.py
"""
Statistics Tracker - Track Rate Resolution Activity

This module counts rate resolutions by outcome:
- Provider-specific rate matched
- Default network rate matched (fallback)
- No applicable rate

Counts are kept in total and per registered service code. Misses on
codes the catalog has never seen only reach the totals.

Files that USE this module:
- netrate.application.rate_resolver (records each resolution outcome)
- netrate.app (attaches a tracker to the resolver)

Files that this module USES:
- None (standard library only)
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Dict

logger = logging.getLogger(__name__)

SOURCE_PROVIDER = "provider"
SOURCE_NETWORK = "network"
SOURCE_NONE = "none"


@dataclass
class ResolutionCounts:
    """Resolution counters for one service code or for all codes."""
    provider_hits: int = 0
    network_hits: int = 0
    misses: int = 0

    @property
    def total(self) -> int:
        return self.provider_hits + self.network_hits + self.misses


@dataclass
class ResolutionSnapshot:
    """Point-in-time copy of all counters."""
    totals: ResolutionCounts
    by_code: Dict[str, ResolutionCounts] = field(default_factory=dict)


class ResolutionStats:
    """Thread-safe counters of resolution outcomes."""

    def __init__(self):
        self._lock = threading.Lock()
        self._totals = ResolutionCounts()
        self._by_code: Dict[str, ResolutionCounts] = {}

    def record(self, code: str, source: str, track_code: bool = True) -> None:
        """
        Count one resolution.

        Args:
            code: Service code that was resolved
            source: SOURCE_PROVIDER, SOURCE_NETWORK or SOURCE_NONE
            track_code: Also count under the code; when False only the
                totals change, so arbitrary query codes add no entries

        Raises:
            ValueError: If source is not a known outcome
        """
        if source not in (SOURCE_PROVIDER, SOURCE_NETWORK, SOURCE_NONE):
            raise ValueError(f"Unknown resolution source: {source}")

        with self._lock:
            targets = [self._totals]
            if track_code:
                targets.append(self._by_code.setdefault(code, ResolutionCounts()))
            for counts in targets:
                if source == SOURCE_PROVIDER:
                    counts.provider_hits += 1
                elif source == SOURCE_NETWORK:
                    counts.network_hits += 1
                else:
                    counts.misses += 1

    def snapshot(self) -> ResolutionSnapshot:
        """Return a copy of the current counters."""
        with self._lock:
            return ResolutionSnapshot(
                totals=replace(self._totals),
                by_code={code: replace(counts) for code, counts in self._by_code.items()},
            )

    def reset(self) -> None:
        """Zero all counters."""
        with self._lock:
            self._totals = ResolutionCounts()
            self._by_code = {}
        logger.info("Resolution statistics reset")
