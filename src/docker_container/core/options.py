from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docker_container.errors import InvalidOptionsError


class PortMapping(BaseModel):
    """A single TCP port binding: container port ``from`` published on host port ``to``."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    from_: int = Field(..., alias="from", ge=1, le=65535, description="Port inside the container")
    to: int = Field(..., ge=1, le=65535, description="Port published on the host")


class RunOptions(BaseModel):
    """How to start a container. Every field is optional."""

    model_config = ConfigDict(extra="forbid")

    ports: Optional[List[PortMapping]] = Field(default=None, description="One mapping or a list of them")
    env: Optional[Dict[str, str]] = None
    links: Optional[Dict[str, str]] = Field(default=None, description="source container -> alias")
    volumes: Optional[Dict[str, str]] = Field(default=None, description="guest path -> host path")

    @field_validator("ports", mode="before")
    @classmethod
    def _single_mapping_as_list(cls, value: Any) -> Any:
        if value is None or isinstance(value, (list, tuple)):
            return value
        return [value]

    @classmethod
    def from_value(cls, value: Union["RunOptions", Dict[str, Any], None]) -> "RunOptions":
        """Accept ``None``, a ``RunOptions`` or a plain mapping using the same keys."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise InvalidOptionsError(f"Invalid run options: {e}") from e


def _port_key(port: int) -> str:
    return f"{port}/tcp"


def _port_bindings(ports: List[PortMapping]) -> Dict[str, List[Dict[str, str]]]:
    bindings: Dict[str, List[Dict[str, str]]] = {}
    for mapping in ports:
        bindings.setdefault(_port_key(mapping.from_), []).append({"HostPort": str(mapping.to)})
    return bindings


def build_create_payload(
    image_tag: str,
    container_name: str,
    options: Union[RunOptions, Dict[str, Any], None] = None,
) -> Dict[str, Any]:
    """
    Translate run options into a Docker Engine ``/containers/create`` payload.

    A field only appears when the matching option was given; ``HostConfig``
    is left out entirely when there are no links, volumes or ports.

    Args:
        image_tag: Image to run.
        container_name: Name to assign to the container.
        options: ``RunOptions`` or an equivalent mapping.

    Returns:
        The payload dict, including ``name``.
    """
    opts = RunOptions.from_value(options)

    payload: Dict[str, Any] = {"name": container_name, "Image": image_tag}
    host_config: Dict[str, Any] = {}

    if opts.env is not None:
        payload["Env"] = [f"{key}={value}" for key, value in opts.env.items()]

    if opts.links is not None:
        host_config["Links"] = [f"{source}:{alias}" for source, alias in opts.links.items()]

    if opts.volumes is not None:
        payload["Volumes"] = {guest: {} for guest in opts.volumes}
        host_config["Binds"] = [f"{host}:{guest}" for guest, host in opts.volumes.items()]

    if opts.ports is not None:
        bindings = _port_bindings(opts.ports)
        payload["ExposedPorts"] = {key: {} for key in bindings}
        host_config["PortBindings"] = bindings

    if host_config:
        payload["HostConfig"] = host_config

    return payload


__all__ = ["PortMapping", "RunOptions", "build_create_payload"]
