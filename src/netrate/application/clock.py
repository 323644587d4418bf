# src/netrate/application/clock.py
"""
Ledger Clock - Externally Driven Logical Time

Holds the current logical time (a ledger height or equivalent counter) for
one resolution session. The engine never advances it on its own; the
embedding system moves it forward with advance() or tick(). Moving it
backwards is rejected.

Files that USE this module:
- netrate.app (supplies now to rate writes and resolutions)

Files that this module USES:
- netrate.domain.errors (ClockRegressionError, InvalidLogicalTimeError)
"""
from __future__ import annotations

import logging
import threading

from netrate.domain.errors import ClockRegressionError, InvalidLogicalTimeError
from netrate.domain.models import LogicalTime
from netrate.shared.validators import validate_logical_time

logger = logging.getLogger(__name__)


class LedgerClock:
    """Monotonically non-decreasing logical clock."""

    def __init__(self, height: LogicalTime = 0):
        if not validate_logical_time(height):
            raise InvalidLogicalTimeError(f"Initial height must be a non-negative integer, got {height!r}")
        self._height = height
        self._lock = threading.Lock()

    @property
    def height(self) -> LogicalTime:
        return self._height

    def advance(self, to: LogicalTime) -> LogicalTime:
        """
        Move the clock to a new height.

        Args:
            to: New height; may equal the current height

        Returns:
            The new height

        Raises:
            InvalidLogicalTimeError: If to is not a non-negative integer
            ClockRegressionError: If to is lower than the current height
        """
        if not validate_logical_time(to):
            raise InvalidLogicalTimeError(f"Height must be a non-negative integer, got {to!r}")
        with self._lock:
            if to < self._height:
                raise ClockRegressionError(f"Cannot move clock back from {self._height} to {to}")
            self._height = to
        logger.debug("Clock advanced to %s", to)
        return to

    def tick(self, step: int = 1) -> LogicalTime:
        """Advance the clock by step (default 1) and return the new height."""
        if not validate_logical_time(step):
            raise InvalidLogicalTimeError(f"Step must be a non-negative integer, got {step!r}")
        with self._lock:
            self._height += step
            height = self._height
        logger.debug("Clock advanced to %s", height)
        return height
