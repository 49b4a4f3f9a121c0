"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from seedbank.core import config as config_module
from seedbank.records.models import BankRecords
from tests.fixtures.bank_records import sample_bank_records


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def bank_records() -> BankRecords:
    """Small consistent snapshot: 2 owners, 3 accounts, 4 register entries."""
    return sample_bank_records()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests never touch real record directories
    monkeypatch.setenv("SEEDBANK_ENV", "test")
    monkeypatch.setenv("SEEDBANK_DATA_DIR", str(tmp_path / "seedbank_data"))
    for name in [
        "SEEDBANK_SOURCE_DIR",
        "SEEDBANK_OUTPUT_DIR",
        "SEEDBANK_SOURCE_SUFFIX",
        "SEEDBANK_PERSISTED_SUFFIX",
        "SEEDBANK_INTEG_PROPERTIES",
        "SEEDBANK_REMAP_SALT",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "obfuscation: Tests for the obfuscation engine")
    config.addinivalue_line("markers", "records: Tests for record models and persistence")
