"""
Shared pytest fixtures and configuration for the elogbook backend test suite.

This module provides:
- Hypothesis configuration for property-based testing
- A controllable clock and a session store / authorizer wired to it
- Attachment files on disk for download tests
"""

import pytest

from hypothesis import HealthCheck, Phase, settings

from elogbook.application.download_access_service import DownloadAccessService
from elogbook.application.event_publisher import EventPublisher
from elogbook.domain.download_auth import (
    DownloadAuthorizer,
    DownloadDescriptor,
    SessionStore,
)
from tests.fixtures.clock import FakeClock

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


# =============================================================================
# Clock and Store Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """Provide a manually advanced clock starting at a fixed UTC time."""
    return FakeClock()


@pytest.fixture
def session_store(clock):
    """Provide an empty session store driven by the fake clock."""
    return SessionStore(clock=clock)


@pytest.fixture
def authorizer(session_store):
    """Provide a DownloadAuthorizer with a 60 second token lifetime."""
    return DownloadAuthorizer(session_store, token_ttl_seconds=60, extend_seconds=300)


@pytest.fixture
def event_publisher():
    return EventPublisher()


@pytest.fixture
def access_service(authorizer, event_publisher):
    return DownloadAccessService(authorizer, event_publisher)


# =============================================================================
# Attachment Fixtures
# =============================================================================

@pytest.fixture
def attachment_file(tmp_path):
    """Write a small file under a hashed-looking name and return its path."""
    path = tmp_path / "3f9a1c0e7b.png"
    path.write_bytes(b"\x89PNG fake image bytes")
    return str(path)


@pytest.fixture
def descriptor(attachment_file):
    """Descriptor pointing at attachment_file, presented as photo.png."""
    return DownloadDescriptor(file_path=attachment_file, original_name="photo.png")


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require external services)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/property/* -> @pytest.mark.property
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)
