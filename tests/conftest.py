"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from echo_deployments.application.service_group import ServiceGroup
from echo_deployments.ports.logger import LoggerPort
from tests.builders import target


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    return Mock(spec=LoggerPort)


@pytest.fixture
def target_a():
    """Service ``a`` in namespace ``ns1``."""
    return target("a", "ns1", "a-0", "a-1", prefix="n1")


@pytest.fixture
def target_b():
    """Service ``b`` in namespace ``ns2``."""
    return target("b", "ns2", "b-0", prefix="n2")


@pytest.fixture
def target_c():
    """Service ``0`` in namespace ``ns3``, sorts before the others."""
    return target("0", "ns3", "c-0")


@pytest.fixture
def group(target_a, target_b):
    """Group of two deployments in insertion order."""
    return ServiceGroup([target_a, target_b])
