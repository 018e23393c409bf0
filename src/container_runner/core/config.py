"""Runner configuration files.

A configuration file describes one container::

    name: mongo
    image: mongo            # bare names resolve to docker.io/library/...
    ports: [27017]          # published on 127.0.0.1 with the same host port
    env:
      MONGO_INITDB_DATABASE: test
    options:
      remove_on_finalization: true

YAML (``.yaml``/``.yml``) and JSON (``.json``) are accepted.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from container_runner.core.schemas import RunnerConfig
from container_runner.utils.logging import get_logger

logger = get_logger(__name__)


def load_config(path: Path | str) -> RunnerConfig:
    """Load and validate a runner configuration file.

    Missing keys take the same defaults as ``RunnerConfig()``: a generated
    name, no image, no ports, no environment and removal on stop.

    Args:
        path: Path to YAML or JSON configuration file

    Returns:
        Validated RunnerConfig with the image already qualified

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported
        pydantic.ValidationError: If config is invalid (e.g. a negative port)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Runner configuration not found: {path}")

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    config = RunnerConfig.model_validate(data or {})
    logger.debug(f"Loaded runner config {config.name} ({config.image or 'no image'}) from {path}")
    return config
