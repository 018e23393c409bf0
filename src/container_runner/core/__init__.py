"""Core module - configuration, schemas and errors."""

from __future__ import annotations

from container_runner.core.config import load_config
from container_runner.core.constants import (
    DEFAULT_HOST_ADDRESS,
    DEFAULT_REGISTRY_PREFIX,
    REGISTRY_EXTENSION_OPTIONS,
    STOP_TIMEOUT_SECONDS,
)
from container_runner.core.errors import (
    ClientCreationError,
    ContainerAlreadyCreatedError,
    ContainerCreateError,
    ContainerRemoveError,
    ContainerRunnerError,
    ContainerStartError,
    ContainerStopError,
    ImagePullError,
    NoContainerIdError,
)
from container_runner.core.naming import generate_container_name
from container_runner.core.registry import qualify_image_name, substring_contained_in_slice
from container_runner.core.schemas import RunnerConfig, RunnerOptions

__all__ = [
    "DEFAULT_HOST_ADDRESS",
    "DEFAULT_REGISTRY_PREFIX",
    "REGISTRY_EXTENSION_OPTIONS",
    "STOP_TIMEOUT_SECONDS",
    "ClientCreationError",
    "ContainerAlreadyCreatedError",
    "ContainerCreateError",
    "ContainerRemoveError",
    "ContainerRunnerError",
    "ContainerStartError",
    "ContainerStopError",
    "ImagePullError",
    "NoContainerIdError",
    "RunnerConfig",
    "RunnerOptions",
    "generate_container_name",
    "load_config",
    "qualify_image_name",
    "substring_contained_in_slice",
]
