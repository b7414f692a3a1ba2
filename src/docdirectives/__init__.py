"""docdirectives - Directive transforms for parsed document trees.

docdirectives turns extension directives in an already-parsed document tree
into render hints: nodes that tell a downstream renderer which element to
emit, with which attributes, around which children. It never parses or
renders markup itself.

Transforms
----------
- ``callout``: container directives to titled, styled containers with a
  severity variant (default, info, warning, success, danger)
- ``embed``: ``embed`` leaf directives to iframes for YouTube, Vimeo, raw
  iframe sources and any configured provider
- ``link-preview``: ``link-preview`` leaf directives to link cards with a
  title, domain and icon derived from the URL
- ``heading-ids``: slug identifiers attached to every heading

Requirements
------------
- Python 3.10+

Examples
--------
Run every built-in transform:

    >>> from docdirectives import apply
    >>> from docdirectives.ast import ContainerDirective, Document, Heading, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text("Getting Started!")]),
    ...     ContainerDirective(name="callout", children=[Text("warning")]),
    ... ])
    >>> doc = apply(doc)
    >>> doc.children[0].metadata["id"]
    'getting-started'

Configure the pipeline:

    >>> from docdirectives import Pipeline, PipelineOptions
    >>> options = PipelineOptions.from_dict({"callout": {"aliases": {"note": "info"}}})
    >>> doc = Pipeline(options=options).execute(doc)

See Also
--------
docdirectives.transforms : Transforms, registry and pipeline
docdirectives.ast : Node definitions, traversal and JSON serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from docdirectives.exceptions import ConfigError, DirectiveError, InvalidUrlError, TransformError, ValidationError
from docdirectives.options import (
    CalloutOptions,
    EmbedOptions,
    EmbedProvider,
    HeadingIdOptions,
    LinkPreviewOptions,
    PipelineOptions,
)
from docdirectives.transforms import (
    CalloutTransform,
    EmbedTransform,
    HeadingIdTransform,
    LinkPreviewTransform,
    Pipeline,
    apply,
    transform_registry,
)
from docdirectives.utils.link_metadata import LinkPreviewData, derive_link_preview
from docdirectives.utils.text import slugify

__all__ = [
    # Transforms
    "CalloutTransform",
    "EmbedTransform",
    "LinkPreviewTransform",
    "HeadingIdTransform",
    # Pipeline
    "Pipeline",
    "apply",
    "transform_registry",
    # Options
    "CalloutOptions",
    "EmbedOptions",
    "EmbedProvider",
    "LinkPreviewOptions",
    "HeadingIdOptions",
    "PipelineOptions",
    # Link metadata and slugs
    "LinkPreviewData",
    "derive_link_preview",
    "slugify",
    # Exceptions
    "DirectiveError",
    "ValidationError",
    "InvalidUrlError",
    "TransformError",
    "ConfigError",
]
