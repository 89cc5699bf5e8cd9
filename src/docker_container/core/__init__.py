"""
Core logic for docker-container.

This module contains the container façade and the run-options translation.
"""

from __future__ import annotations

from docker_container.core.container import DockerContainer
from docker_container.core.options import PortMapping, RunOptions, build_create_payload

__all__ = ["DockerContainer", "PortMapping", "RunOptions", "build_create_payload"]
