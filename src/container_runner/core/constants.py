"""Shared constants for the container runner.

Centralized constants to avoid duplication and ensure consistency across modules.
"""

from __future__ import annotations

# Host address every port binding is published on.
DEFAULT_HOST_ADDRESS = "127.0.0.1"

# Substrings that mark an image reference as already pointing at a registry host.
REGISTRY_EXTENSION_OPTIONS: tuple[str, ...] = (".com", ".io", ".org", ".net")

# Prefix applied to bare image names (official images on Docker Hub).
DEFAULT_REGISTRY_PREFIX = "docker.io/library"

# Grace period given to the container on stop before it is killed.
STOP_TIMEOUT_SECONDS = 60
