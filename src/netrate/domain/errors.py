# src/netrate/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the error codes signaled by fallible operations and
the domain-specific exceptions that represent business rule violations.

Fallible operations return a Result carrying an ErrorCode; the exception
classes are raised for programming errors (bad argument types, clock
regression) and by Result.raise_for_error() for callers that prefer them.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Signaled failure outcomes of mutating operations."""
    CODE_EXISTS = "ERR-CODE-EXISTS"
    CODE_NOT_FOUND = "ERR-CODE-NOT-FOUND"
    INVALID_WINDOW = "ERR-INVALID-WINDOW"
    NETWORK_EXISTS = "ERR-NETWORK-EXISTS"
    NETWORK_NOT_FOUND = "ERR-NETWORK-NOT-FOUND"
    PROVIDER_EXISTS = "ERR-PROVIDER-EXISTS"
    PROVIDER_NOT_FOUND = "ERR-PROVIDER-NOT-FOUND"
    CREDENTIAL_EXISTS = "ERR-CREDENTIAL-EXISTS"


class DomainError(Exception):
    """Base exception for domain errors."""
    code = None


class CodeExistsError(DomainError):
    """Raised when a service code is registered twice."""
    code = ErrorCode.CODE_EXISTS


class CodeNotFoundError(DomainError):
    """Raised when a rate references an unregistered service code."""
    code = ErrorCode.CODE_NOT_FOUND


class InvalidWindowError(DomainError):
    """Raised when a validity window does not satisfy effective < expiry."""
    code = ErrorCode.INVALID_WINDOW


class NetworkExistsError(DomainError):
    """Raised when a network is created twice."""
    code = ErrorCode.NETWORK_EXISTS


class NetworkNotFoundError(DomainError):
    """Raised when an operation references an unknown network."""
    code = ErrorCode.NETWORK_NOT_FOUND


class ProviderExistsError(DomainError):
    """Raised when a provider is registered or added to a network twice."""
    code = ErrorCode.PROVIDER_EXISTS


class ProviderNotFoundError(DomainError):
    """Raised when an operation references an unknown provider."""
    code = ErrorCode.PROVIDER_NOT_FOUND


class CredentialExistsError(DomainError):
    """Raised when a credential is added twice for the same provider."""
    code = ErrorCode.CREDENTIAL_EXISTS


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., negative or not an integer)."""
    pass


class InvalidLogicalTimeError(DomainError):
    """Raised when a logical time is negative or not an integer."""
    pass


class ClockRegressionError(DomainError):
    """Raised when the logical clock is moved backwards."""
    pass


ERROR_TYPES = {
    cls.code: cls
    for cls in (
        CodeExistsError,
        CodeNotFoundError,
        InvalidWindowError,
        NetworkExistsError,
        NetworkNotFoundError,
        ProviderExistsError,
        ProviderNotFoundError,
        CredentialExistsError,
    )
}
