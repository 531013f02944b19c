"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import List

import pytest

from agreement_query.adapters.audit_logger import LoggingAuditLogger
from agreement_query.adapters.memory_provider import InMemoryAgreementProvider
from agreement_query.adapters.metrics_collector import InMemoryMetricsCollector
from agreement_query.config.models import QueryConfig
from agreement_query.domain.entities import Agreement


def make_agreement(
    id: int,
    name: str = "",
    status: str = "Active",
    start: date = date(2025, 1, 1),
    end: date = date(2025, 12, 31),
    created: datetime = datetime(2025, 1, 1, 12, 0),
    description: str = "",
) -> Agreement:
    """Build an agreement with sensible defaults for tests."""
    return Agreement(
        id=id,
        name=name or f"Agreement {id}",
        description=description,
        start_date=start,
        end_date=end,
        status=status,
        created_at=created,
    )


def ids(records: List[Agreement]) -> List[int]:
    return [r.id for r in records]


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def provider() -> InMemoryAgreementProvider:
    """Provider serving the seven sample agreements."""
    return InMemoryAgreementProvider()


@pytest.fixture
def sample_agreements(provider: InMemoryAgreementProvider) -> List[Agreement]:
    """
    The seven sample agreements.

    Statuses: Active x3 (ids 1, 2, 6), Draft x2 (3, 4), Finalized (5),
    Archived (7). Start dates: 2023 (7), 2024 (5), 2025 (the rest).
    """
    return provider.get_agreements()


@pytest.fixture
def audit_logger() -> LoggingAuditLogger:
    """Create a verbose audit logger for testing."""
    return LoggingAuditLogger(verbose=True)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> QueryConfig:
    """Create default query configuration."""
    return QueryConfig()
