"""Exceptions raised by docker-container itself.

Errors coming from the Docker daemon or the SDK are not wrapped; callers see
``docker.errors`` exceptions unchanged.
"""

from __future__ import annotations


class DockerContainerError(Exception):
    """Base class for errors raised by this package."""


class InvalidOptionsError(DockerContainerError, ValueError):
    """Run options could not be translated into a creation payload."""


class ContainerAlreadyRunningError(DockerContainerError):
    """``run`` was called on a descriptor that already owns a container."""

    def __init__(self, container_name: str) -> None:
        super().__init__(f"Container {container_name!r} has already been started")
        self.container_name = container_name


__all__ = [
    "DockerContainerError",
    "InvalidOptionsError",
    "ContainerAlreadyRunningError",
]
