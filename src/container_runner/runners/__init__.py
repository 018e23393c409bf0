"""Runners module - Docker container lifecycle management."""

from __future__ import annotations

from container_runner.runners.base import BaseRunner
from container_runner.runners.container_runner import ContainerRunner, RunnerState

__all__ = ["BaseRunner", "ContainerRunner", "RunnerState"]
