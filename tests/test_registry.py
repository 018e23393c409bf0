"""Tests for the image reference policy."""

import pytest

from container_runner.core.constants import REGISTRY_EXTENSION_OPTIONS
from container_runner.core.registry import qualify_image_name, substring_contained_in_slice


class TestSubstringContainedInSlice:
    """Tests for substring_contained_in_slice."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("mongo", False),
            ("docker.io/library/mongo", True),
            ("ghcr.io/org/app:1.0", True),
            ("registry.example.com/app", True),
            ("", False),
        ],
    )
    def test_registry_extensions(self, value: str, expected: bool) -> None:
        """Test matching against the registry suffix list."""
        assert substring_contained_in_slice(value, REGISTRY_EXTENSION_OPTIONS) is expected

    def test_empty_substrings(self) -> None:
        """Test that nothing matches an empty list."""
        assert substring_contained_in_slice("docker.io/library/mongo", []) is False


class TestQualifyImageName:
    """Tests for qualify_image_name."""

    @pytest.mark.parametrize("image", ["mongo", "redis:7", "bitnami/postgresql", "nginx:1.25"])
    def test_bare_names_use_default_registry(self, image: str) -> None:
        """Test that bare names are prefixed with docker.io/library."""
        assert qualify_image_name(image) == f"docker.io/library/{image}"

    @pytest.mark.parametrize(
        "image",
        ["docker.io/library/mongo", "quay.io/coreos/etcd", "registry.gitlab.com/a/b", "x.net/y"],
    )
    def test_qualified_names_pass_through(self, image: str) -> None:
        """Test that names with a registry suffix are kept as is."""
        assert qualify_image_name(image) == image

    def test_substring_misfire(self) -> None:
        """Test that a bare name containing a suffix is not prefixed."""
        assert qualify_image_name("my.iodine") == "my.iodine"

    def test_custom_policy(self) -> None:
        """Test overriding the suffixes and prefix."""
        assert qualify_image_name("app", extensions=[".local"], prefix="mirror") == "mirror/app"
        assert qualify_image_name("reg.local/app", extensions=[".local"]) == "reg.local/app"
