#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the transform registry and transform metadata."""

import logging
from unittest.mock import Mock, patch

import pytest

from docdirectives.ast.transforms import NodeTransformer
from docdirectives.exceptions import ValidationError
from docdirectives.options import CalloutOptions
from docdirectives.transforms import (
    CALLOUT_METADATA,
    CalloutTransform,
    HeadingIdTransform,
    ParameterSpec,
    TransformMetadata,
    TransformRegistry,
    transform_registry,
)


class SampleTransform(NodeTransformer):
    """Test transform with one keyword parameter."""

    def __init__(self, threshold: int = 10):
        self.threshold = threshold


@pytest.fixture
def sample_metadata():
    """Create sample transform metadata."""
    return TransformMetadata(
        name="sample",
        description="Sample transform",
        transformer_class=SampleTransform,
        parameters={"threshold": ParameterSpec(type=int, default=10, help="Threshold")},
        tags=["testing"],
    )


@pytest.mark.unit
class TestTransformRegistry:
    """Tests for TransformRegistry."""

    def test_singleton(self):
        """Test the registry is a singleton."""
        assert TransformRegistry() is TransformRegistry() is transform_registry

    def test_builtins_registered(self):
        """Test the four built-in transforms are available."""
        names = transform_registry.list_transforms()

        assert {"callout", "embed", "link-preview", "heading-ids"} <= set(names)

    def test_get_builtin_transform(self):
        """Test a built-in can be instantiated by name with parameters."""
        transform = transform_registry.get_transform("heading-ids", id_prefix="doc-")

        assert isinstance(transform, HeadingIdTransform)
        assert transform.options.id_prefix == "doc-"

    def test_get_builtin_with_options(self):
        """Test an options object is passed through."""
        options = CalloutOptions(default_variant="info")
        transform = transform_registry.get_transform("callout", options)

        assert isinstance(transform, CalloutTransform)
        assert transform.options is options

    def test_register_and_lookup(self, clean_registry, sample_metadata):
        """Test registering a custom transform."""
        clean_registry.register(sample_metadata)

        assert clean_registry.has_transform("sample")
        assert clean_registry.get_metadata("sample") is sample_metadata
        assert clean_registry.get_transform("sample", threshold=3).threshold == 3

    def test_register_twice_warns_only_for_different_metadata(self, clean_registry, sample_metadata, caplog):
        """Test re-registering the same metadata is silent and replacing it warns."""
        clean_registry.register(sample_metadata)
        with caplog.at_level(logging.WARNING, logger="docdirectives.transforms.registry"):
            clean_registry.register(sample_metadata)
            assert "already registered" not in caplog.text

            clean_registry.register(
                TransformMetadata(name="sample", description="Other", transformer_class=SampleTransform)
            )
            assert "already registered" in caplog.text

    def test_unregister(self, clean_registry, sample_metadata):
        """Test unregistering a transform."""
        clean_registry.register(sample_metadata)

        assert clean_registry.unregister("sample") is True
        assert clean_registry.unregister("sample") is False
        assert not clean_registry.has_transform("sample")

    def test_unknown_transform(self, clean_registry):
        """Test looking up an unknown transform raises KeyError."""
        with pytest.raises(KeyError):
            clean_registry.get_metadata("missing")

    def test_list_by_tag(self, clean_registry, sample_metadata):
        """Test filtering by tags."""
        clean_registry.register(sample_metadata)
        clean_registry.register(CALLOUT_METADATA)

        assert clean_registry.list_transforms(tags=["testing"]) == ["sample"]
        assert clean_registry.list_transforms() == ["callout", "sample"]

    def test_clear_restores_builtins_on_next_access(self):
        """Test clear() resets the registry to lazy initialization."""
        transform_registry.clear()

        assert transform_registry.has_transform("embed")

    def test_discover_plugins(self, clean_registry, sample_metadata):
        """Test entry points returning metadata are registered and others skipped."""
        good = Mock()
        good.name = "sample"
        good.load.return_value = sample_metadata
        bad = Mock()
        bad.name = "bad"
        bad.load.return_value = object()
        broken = Mock()
        broken.name = "broken"
        broken.load.side_effect = ImportError("missing dependency")

        entry_points = Mock()
        entry_points.select.return_value = [good, bad, broken]
        with patch("importlib.metadata.entry_points", return_value=entry_points):
            count = clean_registry.discover_plugins()

        entry_points.select.assert_called_once_with(group="docdirectives.transforms")
        assert count == 1
        assert clean_registry.has_transform("sample")
        assert not clean_registry.has_transform("bad")


@pytest.mark.unit
class TestTransformMetadata:
    """Tests for TransformMetadata and ParameterSpec."""

    def test_empty_name(self):
        """Test the name is required."""
        with pytest.raises(ValueError):
            TransformMetadata(name="", description="x", transformer_class=SampleTransform)

    def test_class_must_be_transformer(self):
        """Test the class must inherit from NodeTransformer."""
        with pytest.raises(ValueError):
            TransformMetadata(name="x", description="x", transformer_class=dict)

    def test_parameter_type_checked(self, sample_metadata):
        """Test parameters are validated against their spec."""
        with pytest.raises(ValidationError, match="threshold"):
            sample_metadata.create_instance(threshold="high")

    def test_choices(self):
        """Test choices are enforced."""
        with pytest.raises(ValidationError):
            CALLOUT_METADATA.create_instance(default_variant="tip")

    def test_list_parameter_accepts_tuple(self):
        """Test list parameters accept tuples and check element types."""
        CALLOUT_METADATA.create_instance(directive_names=("callout", "note"))

        with pytest.raises(ValidationError, match="index 1"):
            CALLOUT_METADATA.create_instance(directive_names=["callout", 3])

    def test_validator(self):
        """Test a custom validator rejects values."""
        spec = ParameterSpec(type=int, validator=lambda v: v > 0)

        with pytest.raises(ValidationError):
            spec.validate("count", 0)

    def test_required_parameter(self):
        """Test a missing required parameter is reported."""
        metadata = TransformMetadata(
            name="needs",
            description="x",
            transformer_class=SampleTransform,
            parameters={"threshold": ParameterSpec(type=int, required=True)},
        )

        with pytest.raises(ValidationError, match="requires parameter 'threshold'"):
            metadata.create_instance()

    def test_unknown_parameters_warned_and_ignored(self, sample_metadata, caplog):
        """Test unknown parameters are logged and dropped."""
        with caplog.at_level(logging.WARNING, logger="docdirectives.transforms.metadata"):
            transform = sample_metadata.create_instance(threshold=2, colour="red")

        assert transform.threshold == 2
        assert "colour" in caplog.text

    def test_constructor_type_error_wrapped(self, sample_metadata):
        """Test a constructor that rejects an options object raises ValidationError."""
        with pytest.raises(ValidationError, match="Failed to create transform 'sample'"):
            sample_metadata.create_instance(object(), threshold=1)
