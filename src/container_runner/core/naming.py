"""Container name generation."""

from __future__ import annotations

from uuid import uuid4


def generate_container_name() -> str:
    """Return a fresh, unique container name.

    Every call yields a new value; runners that need a stable name must
    set one explicitly.
    """
    return str(uuid4())
