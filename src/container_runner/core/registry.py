"""Image reference policy.

Decides whether an image name already references a registry host or should
be resolved against the default public registry. The decision is a plain
substring match against ``REGISTRY_EXTENSION_OPTIONS``, so a bare name that
happens to contain e.g. ``.io`` is treated as fully qualified.
"""

from __future__ import annotations

from collections.abc import Iterable

from container_runner.core.constants import DEFAULT_REGISTRY_PREFIX, REGISTRY_EXTENSION_OPTIONS


def substring_contained_in_slice(value: str, substrings: Iterable[str]) -> bool:
    """Return True if any of ``substrings`` occurs inside ``value``."""
    return any(s in value for s in substrings)


def qualify_image_name(
    image: str,
    extensions: Iterable[str] = REGISTRY_EXTENSION_OPTIONS,
    prefix: str = DEFAULT_REGISTRY_PREFIX,
) -> str:
    """Resolve a bare image name against the default registry.

    Args:
        image: Image reference as given by the caller (e.g. 'mongo')
        extensions: Substrings that mark a reference as already qualified
        prefix: Registry path used for bare names

    Returns:
        ``image`` unchanged if it looks qualified, else ``<prefix>/<image>``
    """
    if substring_contained_in_slice(image, extensions):
        return image
    return f"{prefix}/{image}"
