#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/_builtin_metadata.py
"""Metadata definitions for the built-in transforms.

These metadata objects are exported via entry points in pyproject.toml and
registered directly by :mod:`docdirectives.transforms.registry`.

"""

from __future__ import annotations

from docdirectives.constants import CALLOUT_VARIANTS
from docdirectives.transforms.callout import CalloutTransform
from docdirectives.transforms.embed import EmbedTransform
from docdirectives.transforms.heading_ids import HeadingIdTransform
from docdirectives.transforms.link_preview import LinkPreviewTransform
from docdirectives.transforms.metadata import ParameterSpec, TransformMetadata

CALLOUT_METADATA = TransformMetadata(
    name="callout",
    description="Replace callout container directives with titled, styled containers",
    transformer_class=CalloutTransform,
    options_field="callout",
    parameters={
        "directive_names": ParameterSpec(
            type=list, element_type=str, default=["callout"], help="Container directive names handled as callouts"
        ),
        "default_variant": ParameterSpec(
            type=str,
            default="default",
            choices=list(CALLOUT_VARIANTS),
            help="Variant used for unrecognized labels",
        ),
        "title_override": ParameterSpec(type=str, help="Title used when the directive has no title attribute"),
        "aliases": ParameterSpec(type=dict, default={}, help="Extra labels mapped to a variant"),
        "icons": ParameterSpec(type=dict, help="Icon glyph per variant"),
    },
    tags=["directives", "containers"],
    author="docdirectives",
)

EMBED_METADATA = TransformMetadata(
    name="embed",
    description="Replace embed leaf directives with iframe render hints",
    transformer_class=EmbedTransform,
    options_field="embed",
    parameters={
        "providers": ParameterSpec(
            type=dict, default={}, help="Additional or overriding providers, key to URL template with {id}"
        ),
    },
    tags=["directives", "media"],
    author="docdirectives",
)

LINK_PREVIEW_METADATA = TransformMetadata(
    name="link-preview",
    description="Replace link-preview leaf directives with link cards",
    transformer_class=LinkPreviewTransform,
    options_field="link_preview",
    parameters={
        "class_name": ParameterSpec(type=str, default="link-preview", help="Extra classes for link-preview cards"),
        "exclude_domains": ParameterSpec(
            type=list, element_type=str, default=[], help="Host substrings whose previews are left untouched"
        ),
        "fail_on_invalid_url": ParameterSpec(
            type=bool, default=True, help="Raise on malformed URLs instead of skipping that directive"
        ),
        "metadata_source": ParameterSpec(
            type=object, validator=callable, help="Callable deriving preview metadata from a URL"
        ),
    },
    tags=["directives", "links"],
    author="docdirectives",
)

HEADING_IDS_METADATA = TransformMetadata(
    name="heading-ids",
    description="Attach slug identifiers to headings",
    transformer_class=HeadingIdTransform,
    options_field="heading_ids",
    parameters={
        "id_prefix": ParameterSpec(type=str, default="", help="Prefix for generated heading identifiers"),
    },
    tags=["headings", "anchors"],
    author="docdirectives",
)

BUILTIN_TRANSFORMS: tuple[TransformMetadata, ...] = (
    CALLOUT_METADATA,
    EMBED_METADATA,
    LINK_PREVIEW_METADATA,
    HEADING_IDS_METADATA,
)


__all__ = [
    "CALLOUT_METADATA",
    "EMBED_METADATA",
    "LINK_PREVIEW_METADATA",
    "HEADING_IDS_METADATA",
    "BUILTIN_TRANSFORMS",
]
