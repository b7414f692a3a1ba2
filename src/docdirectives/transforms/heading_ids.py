#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/heading_ids.py
"""Heading identifier transform."""

from __future__ import annotations

import logging
from typing import Any, Optional

from docdirectives.ast.nodes import Heading, Node
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.ast.utils import extract_text
from docdirectives.options.heading_ids import HeadingIdOptions
from docdirectives.utils.text import slugify

logger = logging.getLogger(__name__)


class HeadingIdTransform(NodeTransformer):
    """Attach a slug identifier to every heading.

    The identifier is derived from the heading's full text and stored in
    ``heading.metadata["id"]``. The heading itself is mutated, never
    replaced, and its children are left as they are apart from any
    directives inside them being transformed by other passes.

    Identifiers are not made unique: two headings with the same text get
    the same identifier.

    Parameters
    ----------
    options : HeadingIdOptions, optional
        Transform options; defaults to ``HeadingIdOptions()``
    **kwargs
        Option overrides applied on top of ``options``

    Examples
    --------
        >>> transform = HeadingIdTransform(id_prefix="doc-")
        >>> transform.transform(document)
        >>> # "Getting Started!" -> metadata['id'] = "doc-getting-started"

    """

    def __init__(self, options: Optional[HeadingIdOptions] = None, **kwargs: Any):
        options = options or HeadingIdOptions()
        self.options = options.create_updated(**kwargs) if kwargs else options

    def heading_id(self, node: Heading) -> str:
        """Compute the identifier for a heading."""
        return f"{self.options.id_prefix}{slugify(extract_text(node.content))}"

    def visit_heading(self, node: Heading) -> Node:
        """Store the identifier in the heading's metadata."""
        node.metadata["id"] = self.heading_id(node)
        logger.debug("Heading level %d assigned id %r", node.level, node.metadata["id"])
        return self.generic_visit(node)


__all__ = [
    "HeadingIdTransform",
]
