"""Base runner abstract class.

Anything that can start and stop a container implements this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseRunner(ABC):
    """Abstract base class for container runners.

    Implementations:
    - ContainerRunner: Single container on the local Docker engine
    """

    @abstractmethod
    def start(self) -> None:
        """Start the container.

        Raises:
            ContainerRunnerError: If any lifecycle step fails
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the container started by ``start``.

        Raises:
            NoContainerIdError: If no container was created
            ContainerRunnerError: If the engine rejects the request
        """
        pass
