"""Container Runner - start and stop a single container on the local Docker engine."""

from __future__ import annotations

from container_runner.core.errors import ContainerRunnerError, NoContainerIdError
from container_runner.core.schemas import RunnerConfig, RunnerOptions
from container_runner.runners.container_runner import ContainerRunner, RunnerState

__version__ = "0.1.0"

__all__ = [
    "ContainerRunner",
    "ContainerRunnerError",
    "NoContainerIdError",
    "RunnerConfig",
    "RunnerOptions",
    "RunnerState",
    "__version__",
]
