# tests/test_clock_and_stats.py
"""
Clock and Statistics Tests - Unit Tests for Logical Time and Resolution Counters

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- netrate.application.clock (LedgerClock)
- netrate.application.stats (ResolutionStats)
- pytest (testing framework)
"""
import pytest

from netrate.application.clock import LedgerClock
from netrate.application.stats import ResolutionStats
from netrate.domain.errors import ClockRegressionError, InvalidLogicalTimeError


class TestLedgerClock:
    def test_starts_at_given_height(self):
        assert LedgerClock(100).height == 100

    def test_advance(self):
        clock = LedgerClock(100)

        assert clock.advance(150) == 150
        assert clock.height == 150

    def test_advance_to_same_height(self):
        clock = LedgerClock(100)

        assert clock.advance(100) == 100

    def test_advance_backwards_rejected(self):
        clock = LedgerClock(100)

        with pytest.raises(ClockRegressionError):
            clock.advance(99)
        assert clock.height == 100

    def test_tick(self):
        clock = LedgerClock()

        assert clock.tick() == 1
        assert clock.tick(10) == 11

    @pytest.mark.parametrize("bad", [-1, 1.5, "10", None])
    def test_invalid_heights(self, bad):
        with pytest.raises(InvalidLogicalTimeError):
            LedgerClock(bad)
        with pytest.raises(InvalidLogicalTimeError):
            LedgerClock().advance(bad)


class TestResolutionStats:
    def test_record_and_snapshot(self):
        stats = ResolutionStats()
        stats.record("99213", "provider")
        stats.record("99213", "network")
        stats.record("99214", "none")

        snapshot = stats.snapshot()

        assert snapshot.totals.total == 3
        assert snapshot.by_code["99213"].provider_hits == 1
        assert snapshot.by_code["99213"].network_hits == 1
        assert snapshot.by_code["99214"].misses == 1

    def test_snapshot_is_a_copy(self):
        stats = ResolutionStats()
        stats.record("99213", "provider")
        snapshot = stats.snapshot()

        stats.record("99213", "provider")

        assert snapshot.totals.provider_hits == 1
        assert snapshot.by_code["99213"].provider_hits == 1

    def test_unknown_source_rejected(self):
        with pytest.raises(ValueError):
            ResolutionStats().record("99213", "cache")

    def test_reset(self):
        stats = ResolutionStats()
        stats.record("99213", "provider")
        stats.reset()

        snapshot = stats.snapshot()
        assert snapshot.totals.total == 0
        assert snapshot.by_code == {}

    def test_untracked_code_counts_in_totals_only(self):
        stats = ResolutionStats()
        stats.record("junk", "none", track_code=False)

        snapshot = stats.snapshot()
        assert snapshot.totals.misses == 1
        assert snapshot.by_code == {}
