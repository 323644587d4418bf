# src/netrate/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from netrate.domain.models import (
    MEMBERSHIP_ACTIVE,
    Credential,
    LogicalTime,
    Network,
    NetworkMembership,
    Provider,
    ProviderRate,
    RateEntry,
    ResolvedRate,
    ServiceCode,
)
from netrate.domain.errors import (
    ClockRegressionError,
    CodeExistsError,
    CodeNotFoundError,
    CredentialExistsError,
    DomainError,
    ErrorCode,
    InvalidLogicalTimeError,
    InvalidRateError,
    InvalidWindowError,
    NetworkExistsError,
    NetworkNotFoundError,
    ProviderExistsError,
    ProviderNotFoundError,
)
from netrate.domain.results import Result

__all__ = [
    "ServiceCode",
    "RateEntry",
    "ProviderRate",
    "ResolvedRate",
    "Network",
    "NetworkMembership",
    "Provider",
    "Credential",
    "LogicalTime",
    "MEMBERSHIP_ACTIVE",
    "ErrorCode",
    "Result",
    "DomainError",
    "CodeExistsError",
    "CodeNotFoundError",
    "InvalidWindowError",
    "NetworkExistsError",
    "NetworkNotFoundError",
    "ProviderExistsError",
    "ProviderNotFoundError",
    "CredentialExistsError",
    "InvalidRateError",
    "InvalidLogicalTimeError",
    "ClockRegressionError",
]
