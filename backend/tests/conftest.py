"""
Shared pytest fixtures.
"""

from datetime import datetime, timezone

import pytest

from buildtrack.core.config import get_settings
from buildtrack.services.milestone_generation_service import (
    MilestoneGenerationService,
    get_milestone_generation_service,
)


@pytest.fixture(autouse=True)
def reset_cached_singletons():
    """Drop cached settings/service so env changes in one test don't leak."""
    get_settings.cache_clear()
    get_milestone_generation_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_milestone_generation_service.cache_clear()


@pytest.fixture
def service() -> MilestoneGenerationService:
    """Create a milestone generation service with default settings."""
    return MilestoneGenerationService()


@pytest.fixture
def project_start() -> datetime:
    return datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def project_end() -> datetime:
    return datetime(2025, 12, 31, tzinfo=timezone.utc)
