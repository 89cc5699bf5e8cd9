from __future__ import annotations

from typing import Any, Dict, Optional, Union

import docker
from docker.models.containers import Container

from docker_container.core.options import RunOptions, build_create_payload
from docker_container.errors import ContainerAlreadyRunningError
from docker_container.utils.logger import logger


class DockerContainer:
    """
    One named container of one image on a Docker daemon.

    The descriptor owns at most one remote container: ``run`` creates and
    starts it, after which ``is_running`` stays true. Daemon and SDK errors
    are logged and re-raised unchanged.
    """

    def __init__(
        self,
        image_tag: str,
        container_name: str,
        client: Optional[docker.DockerClient] = None,
    ) -> None:
        self._image_tag = image_tag
        self._container_name = container_name
        self._client = client
        self._container: Optional[Container] = None

    def __repr__(self) -> str:
        return f"DockerContainer(image_tag={self._image_tag!r}, container_name={self._container_name!r})"

    @property
    def image_tag(self) -> str:
        return self._image_tag

    @property
    def container_name(self) -> str:
        return self._container_name

    @property
    def client(self) -> docker.DockerClient:
        """Docker client, created from DOCKER_HOST & co. on first use."""
        if self._client is None:
            logger.debug("Creating Docker client from environment")
            self._client = docker.from_env()
        return self._client

    @property
    def container(self) -> Optional[Container]:
        """Handle of the started container, None until ``run`` succeeds."""
        return self._container

    def is_running(self) -> bool:
        return self._container is not None

    def pull_if_needed(self) -> bool:
        """
        Pull the image unless a local image already matches the tag.

        Returns:
            True if a pull was requested, False if the image was present.
        """
        try:
            images = self.client.images.list(name=self._image_tag)
        except Exception as e:
            logger.error(f"Failed to list local images for {self._image_tag}: {e}")
            raise

        if images:
            logger.debug(f"Image {self._image_tag} already exists locally")
            return False

        logger.info(f"Pulling image {self._image_tag}...")
        try:
            self.client.images.pull(self._image_tag)
        except Exception as e:
            logger.error(f"Failed to pull image {self._image_tag}: {e}")
            raise
        logger.info(f"Pull requested for image {self._image_tag}")
        return True

    def run(self, options: Union[RunOptions, Dict[str, Any], None] = None) -> Container:
        """
        Create the container from ``options`` and start it.

        Args:
            options: Ports, env, links and volumes, as ``RunOptions`` or a mapping.

        Returns:
            The started container.

        Raises:
            ContainerAlreadyRunningError: This descriptor already started a container.
            InvalidOptionsError: ``options`` could not be translated.
        """
        if self._container is not None:
            raise ContainerAlreadyRunningError(self._container_name)

        config = build_create_payload(self._image_tag, self._container_name, options)
        name = config.pop("name")
        logger.info(f"Creating container {name} from image {self._image_tag}")
        logger.debug(f"Create payload for {name}: {config}")

        try:
            created = self.client.api.create_container_from_config(config, name=name)
            container = self.client.containers.get(created["Id"])
            logger.info(f"Container created: {container.id} ({name})")

            container.start()
        except Exception as e:
            logger.error(f"Failed to create or start container {name}: {e}")
            raise

        self._container = container
        logger.info(f"Container {container.id} ({name}) started")
        return container


__all__ = ["DockerContainer"]
