# src/netrate/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Service codes in the catalog
- Negotiated rate entries with validity windows
- Networks, memberships, providers and credentials

Logical times are plain integers (a ledger height or equivalent counter),
never wall-clock datetimes.

Files that USE this module:
- netrate.application.* (all services store and return domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from typing import Optional  # Type hints for optional values

# Logical time: externally supplied, monotonically non-decreasing counter
LogicalTime = int

MEMBERSHIP_ACTIVE = "active"


@dataclass(frozen=True)
class ServiceCode:
    """
    A billable clinical service registered in the catalog.

    Attributes:
        code: Opaque identifier (e.g. a procedure code such as "99213")
        description: Human readable description
        category: Grouping such as "Evaluation and Management"
    """
    code: str
    description: str
    category: str


@dataclass(frozen=True)
class RateEntry:
    """
    A negotiated price with its validity window.

    Attributes:
        rate: Price in currency minor units (non-negative)
        effective_date: First logical time the rate applies (inclusive)
        expiry_date: Logical time the rate stops applying (exclusive)
    """
    rate: int
    effective_date: LogicalTime
    expiry_date: LogicalTime


@dataclass(frozen=True)
class ProviderRate(RateEntry):
    """
    A provider-specific rate entry.

    Attributes:
        negotiated_date: Logical time at which the rate was recorded
    """
    negotiated_date: LogicalTime


@dataclass(frozen=True)
class ResolvedRate:
    """
    Outcome of a successful rate resolution.

    Attributes:
        rate: Effective price in currency minor units
        source: "provider" or "network", the scope that matched
        entry: The rate entry that supplied the price
    """
    rate: int
    source: str
    entry: RateEntry


@dataclass(frozen=True)
class Network:
    """A named collection of credentialed providers with shared default pricing."""
    network_id: str
    name: str
    description: str
    active: bool = True


@dataclass(frozen=True)
class NetworkMembership:
    """
    A provider's participation in a network.

    Attributes:
        network_id: Network the provider belongs to
        provider_id: Member provider
        join_date: Logical time the provider was added
        status: Free-text status; "active" means participating
        tier: Network tier such as "preferred" or "standard"
    """
    network_id: str
    provider_id: str
    join_date: LogicalTime
    tier: str
    status: str = MEMBERSHIP_ACTIVE


@dataclass(frozen=True)
class Provider:
    """
    A registered healthcare provider.

    Attributes:
        provider_id: Registry key
        name: Display name
        specialty: Clinical specialty
        license_number: License identifier
        license_expiry: Logical time the license expires
        principal: Identity of the caller who registered the provider (inert)
        is_verified: Whether the provider has been verified
    """
    provider_id: str
    name: str
    specialty: str
    license_number: str
    license_expiry: LogicalTime
    principal: Optional[str] = None
    is_verified: bool = False


@dataclass(frozen=True)
class Credential:
    """A credential held by a provider (metadata only, no document content)."""
    provider_id: str
    credential_id: str
    credential_type: str
    issuer: str
    issue_date: LogicalTime
    expiry_date: LogicalTime
