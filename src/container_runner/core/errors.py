"""Exceptions raised by the container runner.

Every engine failure is wrapped in the error class of the lifecycle stage
that failed. The original exception is kept as ``__cause__`` and the stage
label prefixes the message, e.g. ``"pulling image: 404 Client Error ..."``.
"""

from __future__ import annotations


class ContainerRunnerError(RuntimeError):
    """Base class for all runner errors."""

    stage: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.stage)

    @classmethod
    def wrap(cls, err: BaseException) -> ContainerRunnerError:
        """Build a stage error describing ``err``; callers chain it with ``from``."""
        return cls(f"{cls.stage}: {err}")


class NoContainerIdError(ContainerRunnerError):
    """Raised by stop() when no container was ever created."""

    stage = "container id does not exist"


class ClientCreationError(ContainerRunnerError):
    stage = "creating env client"


class ImagePullError(ContainerRunnerError):
    stage = "pulling image"


class ContainerCreateError(ContainerRunnerError):
    stage = "creating container"


class ContainerStartError(ContainerRunnerError):
    stage = "starting container"


class ContainerStopError(ContainerRunnerError):
    stage = "stopping container"


class ContainerRemoveError(ContainerRunnerError):
    stage = "removing container"


class ContainerAlreadyCreatedError(ContainerRunnerError):
    """Raised by start() while the runner still tracks a container that was not stopped."""

    stage = "container already created"
