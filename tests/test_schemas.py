"""Tests for runner configuration schemas."""

import pytest
from pydantic import ValidationError

from container_runner.core.schemas import RunnerConfig, RunnerOptions


class TestRunnerOptions:
    """Tests for RunnerOptions schema."""

    def test_defaults(self) -> None:
        """Test that removal on stop is enabled by default."""
        assert RunnerOptions().remove_on_finalization is True

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        options = RunnerOptions()
        with pytest.raises(ValidationError):
            options.remove_on_finalization = False


class TestRunnerConfig:
    """Tests for RunnerConfig schema."""

    def test_defaults(self) -> None:
        """Test an empty configuration."""
        config = RunnerConfig()
        assert config.name
        assert config.image == ""
        assert config.ports == []
        assert config.env == []
        assert config.options.remove_on_finalization is True

    def test_with_returns_new_value(self) -> None:
        """Test that transformations leave the original untouched."""
        base = RunnerConfig(name="base")
        changed = base.with_name("other").with_ports(80).with_environment_variable("A", "1")
        assert base.name == "base"
        assert base.ports == []
        assert base.env == []
        assert changed.name == "other"
        assert changed.ports == ["80"]
        assert changed.env == ["A=1"]

    def test_with_image(self) -> None:
        """Test image qualification."""
        assert RunnerConfig().with_image("mongo").image == "docker.io/library/mongo"
        assert RunnerConfig().with_image("quay.io/x/y").image == "quay.io/x/y"

    def test_with_name(self) -> None:
        """Test explicit and generated names."""
        assert RunnerConfig().with_name("x").name == "x"
        generated = RunnerConfig().with_name("").name
        assert generated
        assert generated != ""

    def test_with_ports_cumulative(self) -> None:
        """Test that repeated with_ports calls accumulate and duplicates collapse."""
        config = RunnerConfig().with_ports(27017, 8080).with_ports(8080, 9000)
        assert config.ports == ["27017", "8080", "8080", "9000"]
        assert config.exposed_ports == ["27017", "8080", "9000"]
        assert config.port_bindings == {
            "27017": ("127.0.0.1", "27017"),
            "8080": ("127.0.0.1", "8080"),
            "9000": ("127.0.0.1", "9000"),
        }

    def test_with_ports_no_upper_bound(self) -> None:
        """Test that out-of-range ports are passed through."""
        assert RunnerConfig().with_ports(70000).exposed_ports == ["70000"]

    def test_with_ports_rejects_negative(self) -> None:
        """Test that negative ports are rejected."""
        with pytest.raises(ValueError):
            RunnerConfig().with_ports(-1)

    def test_with_environment_variable(self) -> None:
        """Test that variables are appended without escaping."""
        config = (
            RunnerConfig()
            .with_environment_variable("A", "1")
            .with_environment_variable("B", "x=y z")
        )
        assert config.env == ["A=1", "B=x=y z"]

    def test_with_options_replaces(self) -> None:
        """Test that options are replaced wholesale."""
        config = RunnerConfig().with_options(RunnerOptions(remove_on_finalization=False))
        assert config.options.remove_on_finalization is False

    def test_validate_from_dict(self) -> None:
        """Test validation of raw configuration data."""
        config = RunnerConfig.model_validate(
            {
                "name": "",
                "image": "mongo",
                "ports": [27017, "8080"],
                "env": {"MONGO_INITDB_ROOT_USERNAME": "root"},
                "options": {"remove_on_finalization": False},
            }
        )
        assert config.name
        assert config.image == "docker.io/library/mongo"
        assert config.ports == ["27017", "8080"]
        assert config.env == ["MONGO_INITDB_ROOT_USERNAME=root"]
        assert config.options.remove_on_finalization is False

    def test_validate_rejects_bad_ports(self) -> None:
        """Test that invalid ports fail validation."""
        with pytest.raises(ValidationError):
            RunnerConfig.model_validate({"ports": [-5]})
        with pytest.raises(ValidationError):
            RunnerConfig.model_validate({"ports": ["http"]})

    def test_validate_rejects_unknown_keys(self) -> None:
        """Test that typos in configuration keys are reported."""
        with pytest.raises(ValidationError):
            RunnerConfig.model_validate({"imgae": "mongo"})

    def test_env_mapping_scalars(self) -> None:
        """Test that YAML booleans and nulls render like shell values."""
        config = RunnerConfig.model_validate(
            {"env": {"FLAG": True, "OFF": False, "EMPTY": None, "N": 3}}
        )
        assert config.env == ["FLAG=true", "OFF=false", "EMPTY=", "N=3"]

    def test_null_name_generates_one(self) -> None:
        """Test that a null name is treated like a missing one."""
        config = RunnerConfig.model_validate({"name": None, "image": "mongo"})
        assert config.name
        assert isinstance(config.name, str)
