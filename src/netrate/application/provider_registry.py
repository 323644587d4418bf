# src/netrate/application/provider_registry.py
"""
Provider Registry - Provider Registration and Verification

Keyed-record store of providers and their credentials. Credentials are
metadata only; document content and hashes are not stored.

Files that USE this module:
- netrate.app (wires the registry into the engine)

Files that this module USES:
- netrate.adapters.persistence.memory_store (KeyValueStore tables)
- netrate.domain (Provider, Credential, Result, ErrorCode)
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from netrate.adapters.persistence.memory_store import KeyValueStore
from netrate.domain.errors import ErrorCode
from netrate.domain.models import Credential, LogicalTime, Provider
from netrate.domain.results import Result

logger = logging.getLogger(__name__)

PROVIDERS_TABLE = "providers"
CREDENTIALS_TABLE = "credentials"


class ProviderRegistry:
    """Registered providers, their verification flag and credentials."""

    def __init__(self, store: KeyValueStore):
        self._providers = store.table(PROVIDERS_TABLE)
        self._credentials = store.table(CREDENTIALS_TABLE)

    def register_provider(
        self,
        provider_id: str,
        name: str,
        specialty: str,
        license_number: str,
        license_expiry: LogicalTime,
        principal: Optional[str] = None,
    ) -> Result:
        """
        Register an unverified provider.

        Args:
            provider_id: Registry key
            name: Display name
            specialty: Clinical specialty
            license_number: License identifier
            license_expiry: Logical time the license expires
            principal: Identity of the registering caller, stored as given

        Returns:
            Result.success(), or a failure with ErrorCode.PROVIDER_EXISTS
        """
        provider = Provider(
            provider_id=provider_id,
            name=name,
            specialty=specialty,
            license_number=license_number,
            license_expiry=license_expiry,
            principal=principal,
        )
        if not self._providers.insert((provider_id,), provider):
            logger.warning("Provider %s already registered", provider_id)
            return Result.failure(ErrorCode.PROVIDER_EXISTS)

        logger.info("Registered provider %s (%s)", provider_id, specialty)
        return Result.success()

    def verify_provider(self, provider_id: str) -> Result:
        """
        Mark a provider as verified.

        Returns:
            Result.success(), or a failure with ErrorCode.PROVIDER_NOT_FOUND
        """
        key = (provider_id,)
        with self._providers.locked(key):
            provider = self._providers.get(key)
            if provider is None:
                logger.warning("Cannot verify unknown provider %s", provider_id)
                return Result.failure(ErrorCode.PROVIDER_NOT_FOUND)
            self._providers.put(key, replace(provider, is_verified=True))

        logger.info("Verified provider %s", provider_id)
        return Result.success()

    def add_credential(
        self,
        provider_id: str,
        credential_id: str,
        credential_type: str,
        issuer: str,
        issue_date: LogicalTime,
        expiry_date: LogicalTime,
    ) -> Result:
        """
        Attach a credential to a registered provider.

        Returns:
            Result.success(), or a failure with ErrorCode.PROVIDER_NOT_FOUND
            or ErrorCode.CREDENTIAL_EXISTS
        """
        if not self._providers.contains((provider_id,)):
            logger.warning("Cannot add credential %s: provider %s not found", credential_id, provider_id)
            return Result.failure(ErrorCode.PROVIDER_NOT_FOUND)

        credential = Credential(
            provider_id=provider_id,
            credential_id=credential_id,
            credential_type=credential_type,
            issuer=issuer,
            issue_date=issue_date,
            expiry_date=expiry_date,
        )
        if not self._credentials.insert((provider_id, credential_id), credential):
            logger.warning("Credential %s already exists for provider %s", credential_id, provider_id)
            return Result.failure(ErrorCode.CREDENTIAL_EXISTS)

        logger.info("Added credential %s (%s) to provider %s", credential_id, credential_type, provider_id)
        return Result.success()

    def get_provider(self, provider_id: str) -> Optional[Provider]:
        return self._providers.get((provider_id,))

    def get_credential(self, provider_id: str, credential_id: str) -> Optional[Credential]:
        return self._credentials.get((provider_id, credential_id))

    def is_provider_verified(self, provider_id: str) -> bool:
        provider = self.get_provider(provider_id)
        return provider.is_verified if provider is not None else False
