"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from pods.domain.enums import ModuleState
from pods.domain.models import MISSING, ModuleDefinition, ModuleEntry, PodConfig


class TestModuleDefinition:
    """Test cases for the ModuleDefinition model."""

    def test_definition_creation_with_valid_data(self):
        """Test creating a ModuleDefinition with valid data."""
        factory = lambda a, b: a + b
        definition = ModuleDefinition(module_id="sum", dependencies=("a", "b"), factory=factory)

        assert definition.module_id == "sum"
        assert definition.dependencies == ("a", "b")
        assert definition.factory is factory

    def test_definition_converts_list_dependencies_to_tuple(self):
        """Test that list dependencies are stored as a tuple."""
        definition = ModuleDefinition(module_id="m", dependencies=["a"], factory=lambda a: a)
        assert definition.dependencies == ("a",)

    def test_definition_defaults_to_no_dependencies(self):
        """Test that dependencies default to an empty tuple."""
        definition = ModuleDefinition(module_id="m", factory=lambda: 1)
        assert definition.dependencies == ()

    def test_definition_is_frozen(self):
        """Test that ModuleDefinition is immutable."""
        definition = ModuleDefinition(module_id="m", factory=lambda: 1)

        with pytest.raises(ValidationError):
            definition.module_id = "other"

    def test_definition_rejects_empty_id(self):
        """Test that an empty id fails validation."""
        with pytest.raises(ValidationError):
            ModuleDefinition(module_id="", factory=lambda: 1)

    def test_definition_rejects_non_string_id(self):
        """Test that a non-string id fails validation."""
        with pytest.raises(ValidationError):
            ModuleDefinition(module_id=42, factory=lambda: 1)

    def test_definition_rejects_non_string_dependency(self):
        """Test that dependency ids must be strings."""
        with pytest.raises(ValidationError):
            ModuleDefinition(module_id="m", dependencies=("a", 1), factory=lambda a, b: None)

    def test_definition_rejects_non_callable_factory(self):
        """Test that the factory must be callable."""
        with pytest.raises(ValidationError):
            ModuleDefinition(module_id="m", factory="not callable")


class TestModuleEntry:
    """Test cases for the ModuleEntry model."""

    def test_entry_defaults(self):
        """Test that a new entry is unbuilt with no export."""
        entry = ModuleEntry(definition=ModuleDefinition(module_id="m", factory=lambda: 1))

        assert entry.state == ModuleState.UNBUILT
        assert entry.export is None
        assert entry.build_count == 0
        assert entry.is_built is False

    def test_mark_built_memoizes_export(self):
        """Test that mark_built stores the export and updates the state."""
        entry = ModuleEntry(definition=ModuleDefinition(module_id="m", factory=lambda: 1))
        export = object()

        entry.mark_built(export)

        assert entry.export is export
        assert entry.state == ModuleState.BUILT
        assert entry.is_built is True
        assert entry.build_count == 1

    def test_mark_built_with_none_export(self):
        """Test that a None export still counts as built."""
        entry = ModuleEntry(definition=ModuleDefinition(module_id="m", factory=lambda: None))

        entry.mark_built(None)

        assert entry.is_built is True
        assert entry.export is None

    def test_entry_state_is_mutable(self):
        """Test that the state can be changed in place."""
        entry = ModuleEntry(definition=ModuleDefinition(module_id="m", factory=lambda: 1))
        entry.state = ModuleState.RESOLVING
        assert entry.state == ModuleState.RESOLVING


class TestPodConfig:
    """Test cases for the PodConfig model."""

    def test_config_defaults(self):
        """Test default configuration values."""
        config = PodConfig()
        assert config.self_reference_token == "pod"
        assert config.max_depth is None

    def test_config_custom_values(self):
        """Test configuring token and depth."""
        config = PodConfig(self_reference_token="container", max_depth=10)
        assert config.self_reference_token == "container"
        assert config.max_depth == 10

    def test_config_rejects_non_positive_depth(self):
        """Test that max_depth must be at least 1."""
        with pytest.raises(ValidationError):
            PodConfig(max_depth=0)

    def test_config_rejects_empty_token(self):
        """Test that the self-reference token cannot be empty."""
        with pytest.raises(ValidationError):
            PodConfig(self_reference_token="")

    def test_config_is_frozen(self):
        """Test that PodConfig is immutable."""
        config = PodConfig()
        with pytest.raises(ValidationError):
            config.max_depth = 5


class TestMissing:
    """Test cases for the MISSING marker."""

    def test_missing_repr(self):
        """Test that the marker has a readable repr."""
        assert repr(MISSING) == "MISSING"

    def test_missing_is_not_none(self):
        """Test that the marker is distinct from None."""
        assert MISSING is not None
