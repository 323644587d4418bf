# tests/test_provider_registry.py
"""
Provider Registry Tests - Unit Tests for Registration, Verification and Credentials

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- netrate.application.provider_registry (ProviderRegistry)
- pytest (testing framework)
"""
import pytest

from netrate.adapters.persistence.memory_store import KeyValueStore
from netrate.application.provider_registry import ProviderRegistry
from netrate.domain.errors import ErrorCode

PRINCIPAL = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


@pytest.fixture
def registry():
    registry = ProviderRegistry(KeyValueStore())
    registry.register_provider("provider1", "Dr. Smith", "Cardiology", "LIC12345", 1672531200, principal=PRINCIPAL)
    return registry


def _add_board_cert(registry, provider_id="provider1", credential_type="Board Certification"):
    return registry.add_credential(
        provider_id,
        "cred1",
        credential_type,
        "American Board of Cardiology",
        1640995200,
        1672531200,
    )


class TestRegisterProvider:
    def test_register(self, registry):
        provider = registry.get_provider("provider1")

        assert provider.name == "Dr. Smith"
        assert provider.specialty == "Cardiology"
        assert provider.principal == PRINCIPAL
        assert provider.is_verified is False

    def test_duplicate_rejected(self, registry):
        result = registry.register_provider("provider1", "Dr. Jones", "Neurology", "LIC67890", 1672531200)

        assert result.error == ErrorCode.PROVIDER_EXISTS
        assert registry.get_provider("provider1").name == "Dr. Smith"

    def test_unknown_provider_is_absent(self, registry):
        assert registry.get_provider("nonexistent") is None


class TestVerifyProvider:
    def test_verify(self, registry):
        result = registry.verify_provider("provider1")

        assert result.ok
        assert registry.is_provider_verified("provider1") is True

    def test_verify_unknown(self, registry):
        assert registry.verify_provider("nonexistent").error == ErrorCode.PROVIDER_NOT_FOUND

    def test_unknown_is_not_verified(self, registry):
        assert registry.is_provider_verified("nonexistent") is False


class TestCredentials:
    def test_add_credential(self, registry):
        assert _add_board_cert(registry).ok

        credential = registry.get_credential("provider1", "cred1")
        assert credential.credential_type == "Board Certification"
        assert credential.issuer == "American Board of Cardiology"

    def test_add_to_unknown_provider(self, registry):
        result = _add_board_cert(registry, provider_id="nonexistent")

        assert result.error == ErrorCode.PROVIDER_NOT_FOUND

    def test_duplicate_credential_rejected(self, registry):
        _add_board_cert(registry)

        result = _add_board_cert(registry, credential_type="Another Certification")

        assert result.error == ErrorCode.CREDENTIAL_EXISTS
        assert registry.get_credential("provider1", "cred1").credential_type == "Board Certification"
