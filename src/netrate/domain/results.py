# src/netrate/domain/results.py
"""
Operation Results - Discriminated Success/Error Outcomes

Every fallible operation returns a Result instead of raising, so callers
decide whether to surface, retry, or ignore a failure.

Files that USE this module:
- netrate.application.* (fallible operations return Result)

Files that this module USES:
- netrate.domain.errors (ErrorCode and the matching exception types)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from netrate.domain.errors import ERROR_TYPES, DomainError, ErrorCode


@dataclass(frozen=True)
class Result:
    """Outcome of a mutating operation: success, or failure with an ErrorCode."""
    error: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> Result:
        return cls()

    @classmethod
    def failure(cls, code: ErrorCode) -> Result:
        return cls(error=code)

    def raise_for_error(self) -> None:
        """
        Raise the DomainError matching this result's error code.

        Does nothing on success.

        Raises:
            DomainError: Subclass registered for the error code
        """
        if self.error is None:
            return
        error_type = ERROR_TYPES.get(self.error, DomainError)
        raise error_type(self.error.value)
