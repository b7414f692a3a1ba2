#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/embed.py
"""Embed transform: leaf directives to iframe render hints.

    ::embed[youtube]{id="abc123" class="shadow"}

The directive's single text child names the provider and the ``id``
attribute is handed to that provider's URL template.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from docdirectives.ast.nodes import LeafDirective, Node, RenderHint, Text
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.constants import (
    EMBED_ALLOW,
    EMBED_BASE_CLASSES,
    EMBED_DIRECTIVE_NAME,
    EMBED_FRAME_BORDER,
    EMBED_HEIGHT,
    EMBED_WIDTH,
)
from docdirectives.options.embed import EmbedOptions, EmbedProvider
from docdirectives.utils.classes import class_names

logger = logging.getLogger(__name__)


def build_embed_node(provider: EmbedProvider, embed_id: str, extra_classes: str = "") -> RenderHint:
    """Build the iframe hint for one embed.

    Parameters
    ----------
    provider : EmbedProvider
        Resolved provider
    embed_id : str
        Trimmed ``id`` attribute
    extra_classes : str, default ""
        The directive's own ``class`` attribute

    Returns
    -------
    RenderHint
        ``iframe`` hint with no children

    """
    return RenderHint(
        tag_name="iframe",
        attributes={
            "src": provider.src(embed_id),
            "width": EMBED_WIDTH,
            "height": EMBED_HEIGHT,
            "frame_border": EMBED_FRAME_BORDER,
            "allow": EMBED_ALLOW,
            "allow_full_screen": True,
            "class_name": class_names(EMBED_BASE_CLASSES, provider.default_class_name, extra_classes),
        },
        hint_type=provider.hint_type,
    )


class EmbedTransform(NodeTransformer):
    """Replace ``embed`` leaf directives with iframe render hints.

    Only a directive whose children are exactly one Text node is considered.
    Every other shape, an unknown provider key, and a missing or blank
    ``id`` attribute leave the directive untouched without raising.

    Parameters
    ----------
    options : EmbedOptions, optional
        Transform options; defaults to ``EmbedOptions()``
    **kwargs
        Option overrides applied on top of ``options``

    """

    def __init__(self, options: Optional[EmbedOptions] = None, **kwargs: Any):
        options = options or EmbedOptions()
        self.options = options.create_updated(**kwargs) if kwargs else options
        self._providers = self.options.provider_table

    def visit_leaf_directive(self, node: LeafDirective) -> Node:
        """Replace a well-formed embed directive with an iframe hint."""
        if node.name != EMBED_DIRECTIVE_NAME:
            return node
        if len(node.children) != 1 or not isinstance(node.children[0], Text):
            return node

        key = node.children[0].content.strip()
        provider = self._providers.get(key)
        if provider is None:
            logger.debug("No embed provider registered for %r, leaving directive as-is", key)
            return node

        embed_id = (node.attributes.get("id") or "").strip()
        if not embed_id:
            logger.debug("Embed directive for provider %r has no id attribute, leaving directive as-is", key)
            return node

        replacement = build_embed_node(provider, embed_id, node.attributes.get("class", ""))
        replacement.source_location = node.source_location
        return replacement


__all__ = [
    "EmbedTransform",
    "build_embed_node",
]
