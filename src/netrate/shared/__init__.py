# src/netrate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from netrate.shared.validators import (
    validate_log_level,
    validate_logical_time,
    validate_rate_amount,
    validate_window,
)
from netrate.shared.logging_conf import setup_logging

__all__ = [
    "validate_rate_amount",
    "validate_logical_time",
    "validate_window",
    "validate_log_level",
    "setup_logging",
]
