#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the directive transforms.

Each transform has its own frozen Options dataclass; ``PipelineOptions``
bundles them together with the list of transforms to run.
"""

from __future__ import annotations

from docdirectives.options.base import BaseTransformOptions, CloneFrozenMixin
from docdirectives.options.callout import CalloutOptions
from docdirectives.options.embed import DEFAULT_EMBED_PROVIDERS, EmbedOptions, EmbedProvider
from docdirectives.options.heading_ids import HeadingIdOptions
from docdirectives.options.link_preview import LinkPreviewOptions
from docdirectives.options.pipeline import DEFAULT_TRANSFORMS, PipelineOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseTransformOptions",
    "CalloutOptions",
    "EmbedProvider",
    "EmbedOptions",
    "DEFAULT_EMBED_PROVIDERS",
    "LinkPreviewOptions",
    "HeadingIdOptions",
    "PipelineOptions",
    "DEFAULT_TRANSFORMS",
]
