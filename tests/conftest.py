"""
Pytest configuration for docker-container tests.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add the src directory to the Python path
src_path = os.path.join(os.path.dirname(__file__), '..', 'src')
sys.path.insert(0, os.path.abspath(src_path))

CONTAINER_NAME = "a"


@pytest.fixture
def fake_container() -> MagicMock:
    """Container model returned by the mocked client."""
    container = MagicMock()
    container.id = "0123456789ab"
    container.name = CONTAINER_NAME
    return container


@pytest.fixture
def docker_client(fake_container: MagicMock) -> MagicMock:
    """Docker client stand-in: no local images, creation yields ``fake_container``."""
    client = MagicMock()
    client.images.list.return_value = []
    client.api.create_container_from_config.return_value = {"Id": fake_container.id, "Warnings": []}
    client.containers.get.return_value = fake_container
    return client


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "requires_docker: marks tests that require Docker to be running"
    )
