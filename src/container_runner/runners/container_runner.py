"""Docker container runner.

This module manages the complete lifecycle of a single container:
- Image pulling
- Container creation with port bindings and environment
- Start
- Stop and optional removal

Each step runs only if the previous one succeeded. Nothing is retried and
nothing is rolled back: a container created by a failed ``start`` stays on
the engine until ``stop`` is called.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from container_runner.core.constants import STOP_TIMEOUT_SECONDS
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
from container_runner.core.schemas import RunnerConfig, RunnerOptions
from container_runner.runners.base import BaseRunner

if TYPE_CHECKING:
    from docker import DockerClient
    from docker.models.containers import Container

logger = logging.getLogger(__name__)

# Errors raised by the Docker SDK itself and by its HTTP transport
ENGINE_ERRORS: tuple[type[Exception], ...] = (DockerException, RequestException)


class RunnerState(str, Enum):
    """Lifecycle state of a runner's container."""

    UNSTARTED = "unstarted"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"
    REMOVED = "removed"
    FAILED = "failed"


class ContainerRunner(BaseRunner):
    """Starts and stops a single container on the local Docker engine.

    Configuration is accumulated through chainable setters before ``start``
    is called. Each setter replaces the runner's immutable ``RunnerConfig``
    with a transformed copy and returns the runner.

    Example:
        ```python
        runner = (
            ContainerRunner()
            .with_name("mongo")
            .with_image("mongo")
            .with_ports(27017)
        )
        runner.start()
        ...
        runner.stop()  # stops and, by default, removes the container
        ```
    """

    def __init__(
        self,
        config: RunnerConfig | None = None,
        client_factory: Callable[..., DockerClient] | None = None,
        client_timeout: int | None = None,
    ) -> None:
        """Initialize the runner. No engine call is made here.

        Args:
            config: Initial configuration (defaults to an empty RunnerConfig)
            client_factory: Callable returning a Docker client (defaults to docker.from_env)
            client_timeout: Timeout in seconds for engine API calls
        """
        self._config = config if config is not None else RunnerConfig()
        self._client_factory = client_factory or docker.from_env
        self._client_timeout = client_timeout

        self._client: DockerClient | None = None
        self._container: Container | None = None
        # id managed by the runner itself
        self._container_id: str | None = None
        self._state = RunnerState.UNSTARTED

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def container_id(self) -> str | None:
        return self._container_id

    def with_ports(self, *ports: int) -> ContainerRunner:
        """Expose and publish ``ports`` on 127.0.0.1 with the same host port."""
        self._config = self._config.with_ports(*ports)
        return self

    def with_image(self, image: str) -> ContainerRunner:
        """Set the image; bare names resolve to the Docker Hub library."""
        self._config = self._config.with_image(image)
        return self

    def with_name(self, name: str) -> ContainerRunner:
        """Set the container name.

        Starting with a name that already exists on the engine fails.
        An empty name is replaced by a freshly generated one.
        """
        self._config = self._config.with_name(name)
        return self

    def with_environment_variable(self, key: str, value: str) -> ContainerRunner:
        self._config = self._config.with_environment_variable(key, value)
        return self

    def with_options(self, options: RunnerOptions) -> ContainerRunner:
        """Replace the runner options."""
        self._config = self._config.with_options(options)
        return self

    def start(self) -> None:
        """Pull the image, then create and start the container.

        A runner can be started again once its container was stopped.

        Raises:
            ContainerAlreadyCreatedError: If a container created by an earlier
                start has not been stopped yet
        """
        if self._container_id is not None and self._state != RunnerState.STOPPED:
            raise ContainerAlreadyCreatedError(
                f"container {self._container_id} already created; call stop() first"
            )

        self._state = RunnerState.STARTING
        config = self._config

        # A previous start leaves its client open
        self.close()
        with self._stage(ClientCreationError):
            self._client = self._create_client()

        logger.info(f"Pulling image {config.image}")
        with self._stage(ImagePullError):
            self._client.images.pull(config.image)

        logger.info(f"Creating container {config.name}")
        with self._stage(ContainerCreateError):
            container = self._client.containers.create(
                config.image, **self._prepare_create_kwargs(config)
            )

        # Stop becomes valid from here on, even if start fails below
        self._container = container
        self._container_id = container.id

        logger.info(f"Starting container {container.short_id}")
        with self._stage(ContainerStartError):
            container.start()

        self._state = RunnerState.RUNNING
        logger.info(f"Container {container.short_id} started")

    def stop(self) -> None:
        """Stop the container, removing it if the options ask for it."""
        if self._container_id is None or self._container is None:
            raise NoContainerIdError()

        self._state = RunnerState.STOPPING
        container = self._container

        logger.info(f"Stopping container {container.short_id}")
        with self._stage(ContainerStopError):
            container.stop(timeout=STOP_TIMEOUT_SECONDS)
        self._state = RunnerState.STOPPED
        logger.info(f"Container {container.short_id} stopped")

        if self._config.options.remove_on_finalization:
            logger.info(f"Removing container {container.short_id}")
            with self._stage(ContainerRemoveError):
                container.remove()
            self._container = None
            self._container_id = None
            self._state = RunnerState.REMOVED
            logger.info(f"Container {container.short_id} removed")

    def close(self) -> None:
        """Release the Docker client."""
        if self._client is not None:
            with contextlib.suppress(Exception):
                self._client.close()

    def __enter__(self) -> ContainerRunner:
        try:
            self.start()
        except ContainerRunnerError:
            self.close()
            raise
        return self

    def __exit__(self, exc_type: type[BaseException] | None, *exc_info: object) -> None:
        try:
            if self._container_id is not None:
                self.stop()
        except ContainerRunnerError as e:
            if exc_type is None:
                raise
            # The exception raised inside the with-block takes precedence
            logger.error(f"Cleanup after failed block did not succeed: {e}")
        finally:
            self.close()

    def _create_client(self) -> DockerClient:
        if self._client_timeout is None:
            return self._client_factory()
        return self._client_factory(timeout=self._client_timeout)

    def _prepare_create_kwargs(self, config: RunnerConfig) -> dict[str, Any]:
        """Prepare keyword arguments for containers.create().

        ``ports`` drives both the exposed ports and the host port bindings.
        """
        kwargs: dict[str, Any] = {"name": config.name}
        if config.port_bindings:
            kwargs["ports"] = config.port_bindings
        if config.env:
            kwargs["environment"] = list(config.env)
        return kwargs

    @contextlib.contextmanager
    def _stage(self, error_cls: type[ContainerRunnerError]) -> Iterator[None]:
        """Wrap engine errors raised inside the block in ``error_cls``.

        Any exception leaving the block marks the runner as failed; only
        engine errors are wrapped.
        """
        try:
            yield
        except ENGINE_ERRORS as e:
            self._state = RunnerState.FAILED
            logger.error(f"Failed {error_cls.stage}: {e}")
            raise error_cls.wrap(e) from e
        except Exception:
            self._state = RunnerState.FAILED
            raise
