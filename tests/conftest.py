"""
Pytest Configuration and Fixtures

This module provides:
- Shared fixtures for all tests
- Test category markers
"""

import pytest
import sys
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import Mock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import (
    CONFIG, EXPECTED, TEST_DATA, TEST_CATEGORIES,
    get_all_sample_documents,
)
from blogmon.models.document import Document
from blogmon.models.interest import Interest


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def fixed_now():
    """A fixed 'current time' for recency calculations."""
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def sample_documents(fixed_now):
    """Sample Documents, one day apart, newest first."""
    documents = []
    for offset, data in enumerate(get_all_sample_documents()):
        data["published_at"] = fixed_now - timedelta(days=offset)
        documents.append(Document(**data))
    return documents


@pytest.fixture
def interests():
    """The test interest profile."""
    return [Interest.from_dict(entry) for entry in TEST_DATA["interests"]]


@pytest.fixture
def test_config():
    """Provide access to test configuration."""
    return CONFIG


@pytest.fixture
def expected_values():
    """Provide access to expected values."""
    return EXPECTED


@pytest.fixture
def mock_signal_provider():
    """Provide a mock community-signal provider that finds nothing."""
    from blogmon.signals.base import CommunitySignalProvider

    provider = Mock(spec=CommunitySignalProvider)
    provider.name = "mock_provider"
    provider.search_by_url.return_value = None

    return provider


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    for marker, info in TEST_CATEGORIES.items():
        config.addinivalue_line("markers", f"{marker}: {info['description']}")
