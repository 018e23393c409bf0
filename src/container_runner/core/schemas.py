"""Pydantic schemas for the container runner.

``RunnerConfig`` is an immutable value: every ``with_*`` method returns a new
config, leaving the original untouched. ``ContainerRunner`` wraps these
transformations in a chainable builder.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from container_runner.core.constants import DEFAULT_HOST_ADDRESS
from container_runner.core.naming import generate_container_name
from container_runner.core.registry import qualify_image_name


def _port_string(port: Any) -> str:
    """Normalize a port number to its string form.

    Only negative and non-integer values are rejected; the upper range is
    left for the engine to validate.
    """
    if isinstance(port, bool) or not isinstance(port, (int, str)):
        raise ValueError(f"Invalid port: {port!r}")
    try:
        value = int(port)
    except ValueError as e:
        raise ValueError(f"Invalid port: {port!r}") from e
    if value < 0:
        raise ValueError(f"Port must be non-negative: {port!r}")
    return str(value)


def _env_value(value: Any) -> str:
    """Render a mapping value the way a shell would see it.

    YAML booleans become ``true``/``false`` and a null value becomes empty.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RunnerOptions(BaseModel):
    """Options controlling runner behavior.

    Attributes:
        remove_on_finalization: Remove the container after it is stopped
    """

    remove_on_finalization: bool = Field(default=True)

    model_config = {"frozen": True, "extra": "forbid"}


class RunnerConfig(BaseModel):
    """Complete configuration for a single container.

    Attributes:
        name: Container name (generated when empty)
        image: Fully qualified image reference
        ports: Container ports in the order they were added, as strings
        env: Environment variables as ``KEY=VALUE`` strings
        options: Runner behavior options
    """

    name: str = Field(default_factory=generate_container_name)
    image: str = Field(default="", description="Image reference")
    ports: list[str] = Field(default_factory=list)
    env: list[str] = Field(default_factory=list)
    options: RunnerOptions = Field(default_factory=RunnerOptions)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> Any:
        """Generate a name when none was given."""
        return v or generate_container_name()

    @field_validator("image")
    @classmethod
    def qualify_image(cls, v: str) -> str:
        """Resolve bare image names against the default registry."""
        return qualify_image_name(v) if v else v

    @field_validator("ports", mode="before")
    @classmethod
    def normalize_ports(cls, v: Any) -> list[str]:
        if v is None:
            return []
        return [_port_string(p) for p in v]

    @field_validator("env", mode="before")
    @classmethod
    def normalize_env(cls, v: Any) -> Any:
        """Accept a mapping as well as a list of KEY=VALUE strings."""
        if v is None:
            return []
        if isinstance(v, dict):
            return [f"{key}={_env_value(val)}" for key, val in v.items()]
        return v

    @property
    def exposed_ports(self) -> list[str]:
        """Distinct ports, in first-seen order."""
        return list(dict.fromkeys(self.ports))

    @property
    def port_bindings(self) -> dict[str, tuple[str, str]]:
        """Host bindings keyed by container port; host port equals container port."""
        return {port: (DEFAULT_HOST_ADDRESS, port) for port in self.exposed_ports}

    def with_ports(self, *ports: int) -> RunnerConfig:
        """Return a copy exposing ``ports`` in addition to the current ones.

        Raises:
            ValueError: If a port is negative or not an integer
        """
        added = [_port_string(p) for p in ports]
        return self.model_copy(update={"ports": [*self.ports, *added]})

    def with_image(self, image: str) -> RunnerConfig:
        return self.model_copy(update={"image": qualify_image_name(image)})

    def with_name(self, name: str) -> RunnerConfig:
        return self.model_copy(update={"name": name or generate_container_name()})

    def with_environment_variable(self, key: str, value: str) -> RunnerConfig:
        return self.model_copy(update={"env": [*self.env, f"{key}={value}"]})

    def with_options(self, options: RunnerOptions) -> RunnerConfig:
        """Return a copy with ``options`` replacing the current options wholesale."""
        return self.model_copy(update={"options": options})
