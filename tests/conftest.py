"""Pytest configuration and shared fixtures for cabinet builder tests."""

from __future__ import annotations

import pytest

from cabinet_builder.application import ServiceFactory, reset_factory
from cabinet_builder.domain import CabinetSpec
from cabinet_builder.domain.value_objects import CabinetKind


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising several layers together"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_factory():
    """Reset the process-wide factory between tests."""
    reset_factory()
    yield
    reset_factory()


@pytest.fixture
def factory() -> ServiceFactory:
    """A factory with its own in-memory scene and run registry."""
    return ServiceFactory(room_name="Kitchen")


@pytest.fixture
def base_cabinet() -> CabinetSpec:
    """A standard 24" frameless base cabinet with default dimensions."""
    return CabinetSpec.create(CabinetKind.BASE, width=24.0)


@pytest.fixture
def wall_cabinet() -> CabinetSpec:
    """A standard 30" wall cabinet."""
    return CabinetSpec.create(CabinetKind.WALL, width=30.0)
