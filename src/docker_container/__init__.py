"""
docker-container - run a single named container on a Docker daemon.

This package provides:
- Pulling an image only when no local image matches its tag
- Translating ports, environment, links and volumes into an Engine API payload
- Creating and starting the container through the docker SDK
"""

from __future__ import annotations

__version__ = "1.0.0"

from docker_container.core.container import DockerContainer
from docker_container.core.options import PortMapping, RunOptions, build_create_payload
from docker_container.errors import (
    ContainerAlreadyRunningError,
    DockerContainerError,
    InvalidOptionsError,
)
from docker_container.utils.logger import get_logger

__all__ = [
    "DockerContainer",
    "RunOptions",
    "PortMapping",
    "build_create_payload",
    "DockerContainerError",
    "InvalidOptionsError",
    "ContainerAlreadyRunningError",
    "get_logger",
    "__version__",
]
