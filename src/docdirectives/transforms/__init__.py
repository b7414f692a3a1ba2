#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/__init__.py
"""Directive transforms and the pipeline that runs them.

Four transforms ship with the package:

- ``callout``: container directives to titled, styled containers
- ``embed``: leaf directives to iframe render hints
- ``link-preview``: leaf directives to link cards
- ``heading-ids``: slug identifiers on headings

Third-party packages can add transforms through the
``docdirectives.transforms`` entry-point group.

Examples
--------
Run transforms by name:

    >>> from docdirectives.transforms import apply
    >>> doc = apply(doc, transforms=["callout", "embed"])

Use a transform instance with parameters:

    >>> from docdirectives.transforms import CalloutTransform
    >>> doc = CalloutTransform(aliases={"note": "info"}).transform(doc)

Register a custom transform:

    >>> from docdirectives.transforms import transform_registry, TransformMetadata
    >>> transform_registry.register(TransformMetadata(
    ...     name="my-transform",
    ...     description="My custom transform",
    ...     transformer_class=MyTransform,
    ... ))

"""

from __future__ import annotations

from ._builtin_metadata import (
    BUILTIN_TRANSFORMS,
    CALLOUT_METADATA,
    EMBED_METADATA,
    HEADING_IDS_METADATA,
    LINK_PREVIEW_METADATA,
)
from .callout import CalloutTransform, build_callout_node
from .embed import EmbedTransform, build_embed_node
from .heading_ids import HeadingIdTransform
from .link_preview import LinkPreviewTransform, build_link_preview_node
from .metadata import ParameterSpec, TransformMetadata
from .pipeline import Pipeline, apply
from .registry import TransformRegistry, transform_registry

__all__ = [
    # Transforms
    "CalloutTransform",
    "EmbedTransform",
    "LinkPreviewTransform",
    "HeadingIdTransform",
    # Node builders
    "build_callout_node",
    "build_embed_node",
    "build_link_preview_node",
    # Registry and metadata
    "TransformRegistry",
    "transform_registry",
    "TransformMetadata",
    "ParameterSpec",
    "BUILTIN_TRANSFORMS",
    "CALLOUT_METADATA",
    "EMBED_METADATA",
    "LINK_PREVIEW_METADATA",
    "HEADING_IDS_METADATA",
    # Pipeline
    "Pipeline",
    "apply",
]
