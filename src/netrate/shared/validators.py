# src/netrate/shared/validators.py
"""
Input Validation Utilities - Argument and Configuration Validation

This module provides validation functions for rate amounts,
logical times and logging levels. Each returns True/False; callers decide
which exception to raise.

Files that USE this module:
- netrate.config.settings (uses validate_log_level in Settings field validators)
- netrate.application.* (argument guards before writes)

Files that this module USES:
- None (pure utility functions)
"""
import logging
from typing import Any


def _is_plain_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid amount or time
    return isinstance(value, int) and not isinstance(value, bool)


def validate_rate_amount(rate: Any) -> bool:
    """
    Validate a rate amount in currency minor units.

    Args:
        rate: Amount to validate

    Returns:
        True if rate is a non-negative integer, False otherwise
    """
    return _is_plain_int(rate) and rate >= 0


def validate_logical_time(value: Any) -> bool:
    """
    Validate a logical time (ledger height or equivalent counter).

    Args:
        value: Logical time to validate

    Returns:
        True if value is a non-negative integer, False otherwise
    """
    return _is_plain_int(value) and value >= 0


def validate_window(effective_date: int, expiry_date: int) -> bool:
    """Return True if the half-open window [effective_date, expiry_date) is non-empty."""
    return effective_date < expiry_date


def validate_log_level(level: str) -> bool:
    """
    Validate a logging level name.

    Args:
        level: Level name such as "INFO" or "debug"

    Returns:
        True if the name maps to a standard logging level
    """
    if not level:
        return False
    return isinstance(logging.getLevelName(level.upper()), int)
