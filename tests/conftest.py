"""
Root conftest.py for pwpolicy tests.

This file provides:
1. Common pytest markers for test categorization
2. Shared fixtures used across multiple test modules
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from pwpolicy.security.outcome import ValidationOutcome
from pwpolicy.security.passwords import configure_breached_checker


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Automatically mark security-related tests so `-m security` selects them.

    We tag tests under `tests/security/` and `tests/auth/` with the `security` marker.
    """
    for item in items:
        norm = str(item.fspath).replace("\\", "/")
        if "/tests/security/" in norm or "/tests/auth/" in norm:
            item.add_marker(pytest.mark.security)


def pytest_configure(config):
    # Ensure custom markers are registered even if pyproject.toml isn't picked up in some contexts
    for name, desc in [
        ("security", "Password policy and auth hardening tests"),
        ("network", "Tests that exercise HTTP clients (mocked transports only)"),
    ]:
        config.addinivalue_line("markers", f"{name}: {desc}")


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def reset_breached_checker():
    # Ensure no global checker leaks between tests
    configure_breached_checker(None)
    yield
    configure_breached_checker(None)


@pytest.fixture
def passing_base_check() -> AsyncMock:
    """Base check stub that always succeeds; swap `validate.return_value` per test."""
    check = AsyncMock()
    check.validate.return_value = ValidationOutcome.SUCCESS
    return check


@pytest.fixture
def manager() -> object:
    """Opaque identity-store collaborator."""
    return object()
