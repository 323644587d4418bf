# tests/test_service_catalog.py
"""
Service Catalog Tests - Unit Tests for Service Code Registration

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- netrate.application.service_catalog (ServiceCatalog)
- netrate.adapters.persistence.memory_store (KeyValueStore)
- pytest (testing framework)
"""
import pytest

from netrate.adapters.persistence.memory_store import KeyValueStore
from netrate.application.service_catalog import ServiceCatalog
from netrate.domain.errors import CodeExistsError, ErrorCode
from netrate.domain.models import ServiceCode


@pytest.fixture
def catalog():
    return ServiceCatalog(KeyValueStore())


class TestAddCode:
    def test_add_new_code(self, catalog):
        result = catalog.add_code("99213", "Office visit, established patient", "Evaluation and Management")

        assert result.ok
        code = catalog.get_code("99213")
        assert code == ServiceCode(
            code="99213",
            description="Office visit, established patient",
            category="Evaluation and Management",
        )

    def test_duplicate_code_rejected(self, catalog):
        catalog.add_code("99213", "Office visit, established patient", "Evaluation and Management")
        result = catalog.add_code("99213", "Another description", "Another category")

        assert not result.ok
        assert result.error == ErrorCode.CODE_EXISTS
        assert result.error.value == "ERR-CODE-EXISTS"

    def test_duplicate_keeps_first_registration(self, catalog):
        catalog.add_code("99213", "Office visit, established patient", "Evaluation and Management")
        catalog.add_code("99213", "Another description", "Another category")

        assert catalog.get_code("99213").description == "Office visit, established patient"

    def test_duplicate_with_identical_arguments_still_rejected(self, catalog):
        assert catalog.add_code("99214", "Visit", "E/M").ok
        assert catalog.add_code("99214", "Visit", "E/M").error == ErrorCode.CODE_EXISTS

    def test_raise_for_error_on_duplicate(self, catalog):
        catalog.add_code("99213", "Visit", "E/M")
        with pytest.raises(CodeExistsError):
            catalog.add_code("99213", "Visit", "E/M").raise_for_error()

    @pytest.mark.parametrize("opaque_code", ["", "   ", 99213])
    def test_codes_are_opaque(self, catalog, opaque_code):
        assert catalog.add_code(opaque_code, "Visit", "E/M").ok
        assert catalog.has_code(opaque_code)
        assert catalog.add_code(opaque_code, "Visit", "E/M").error == ErrorCode.CODE_EXISTS


class TestLookup:
    def test_unknown_code_is_absent(self, catalog):
        assert catalog.get_code("00000") is None
        assert catalog.has_code("00000") is False

    def test_has_code_after_registration(self, catalog):
        catalog.add_code("99213", "Visit", "E/M")
        assert catalog.has_code("99213") is True
