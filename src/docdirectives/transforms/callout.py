#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/callout.py
"""Callout transform: container directives to titled, styled containers.

A callout is written as a container directive whose first child names its
severity::

    :::callout{title="Heads up"}
    warning

    Back up your data first.
    :::

The first child is consumed as the classification label and does not appear
in the output. The remaining children become the callout content.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from docdirectives.ast.nodes import ContainerDirective, Node, RenderHint, Text
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.ast.utils import extract_text
from docdirectives.constants import (
    CALLOUT_BASE_CLASSES,
    CALLOUT_CONTENT_CLASSES,
    CALLOUT_ICON_CLASSES,
    CALLOUT_TITLE_CLASSES,
    CALLOUT_TITLE_TEXT_CLASSES,
    CALLOUT_VARIANT_CLASSES,
    CALLOUT_VARIANTS,
    DEFAULT_CALLOUT_LABEL,
    DEFAULT_CALLOUT_VARIANT,
    CalloutVariant,
)
from docdirectives.options.callout import CalloutOptions
from docdirectives.utils.classes import VariantStyle, class_names

logger = logging.getLogger(__name__)

CALLOUT_STYLE = VariantStyle(
    base=CALLOUT_BASE_CLASSES,
    variants=CALLOUT_VARIANT_CLASSES,
    default_variant=DEFAULT_CALLOUT_VARIANT,
)


def build_callout_node(
    content: list[Node],
    title: str,
    icon: str,
    class_name: str,
    source_location: Any = None,
) -> RenderHint:
    """Build the container that replaces a callout directive.

    Parameters
    ----------
    content : list of Node
        Callout body (the directive's children after the first)
    title : str
        Title text; an empty title omits the title block
    icon : str
        Icon glyph shown before the title
    class_name : str
        Composed class string for the outer container
    source_location : SourceLocation, optional
        Location of the replaced directive

    Returns
    -------
    RenderHint
        ``div`` with an optional title block followed by the content block

    """
    content_node = RenderHint(
        tag_name="div",
        attributes={"class_name": CALLOUT_CONTENT_CLASSES},
        children=list(content),
    )

    children: list[Node] = [content_node]
    if title:
        title_node = RenderHint(
            tag_name="div",
            attributes={"class_name": CALLOUT_TITLE_CLASSES},
            children=[
                RenderHint(tag_name="span", attributes={"class_name": CALLOUT_ICON_CLASSES}, children=[Text(icon)]),
                RenderHint(
                    tag_name="span", attributes={"class_name": CALLOUT_TITLE_TEXT_CLASSES}, children=[Text(title)]
                ),
            ],
        )
        children.insert(0, title_node)

    return RenderHint(
        tag_name="div",
        attributes={"class_name": class_name},
        children=children,
        hint_type="callout",
        source_location=source_location,
    )


class CalloutTransform(NodeTransformer):
    """Replace callout container directives with styled containers.

    Classification reads the plain text of the directive's first child,
    trimmed and lower-cased. A variant name selects that variant, a
    configured alias selects its variant, and anything else falls back to
    the default variant. A directive without children classifies as
    ``"default"``. Unrecognized labels are never an error.

    The container's class string is the variant style, then ``callout``,
    then ``callout-{label}`` where ``label`` is the raw lower-cased text, so
    custom labels stay visible to downstream CSS even when they fall back.

    Parameters
    ----------
    options : CalloutOptions, optional
        Transform options; defaults to ``CalloutOptions()``
    **kwargs
        Option overrides applied on top of ``options``

    Examples
    --------
    >>> transform = CalloutTransform(aliases={"note": "info"})
    >>> transform.transform(document)

    """

    def __init__(self, options: Optional[CalloutOptions] = None, **kwargs: Any):
        """Initialize with options and optional overrides."""
        options = options or CalloutOptions()
        self.options = options.create_updated(**kwargs) if kwargs else options

    def classify(self, node: ContainerDirective) -> tuple[str, CalloutVariant]:
        """Return the raw label and the resolved variant of a callout.

        Parameters
        ----------
        node : ContainerDirective
            Callout directive

        Returns
        -------
        tuple of (str, str)
            Lower-cased label as written, and the variant it resolves to

        """
        text = extract_text(node.children[0]) if node.children else ""
        label = (text or DEFAULT_CALLOUT_LABEL).strip().lower()

        if label in CALLOUT_VARIANTS:
            return label, label  # type: ignore[return-value]
        if label in self.options.aliases:
            return label, self.options.aliases[label]  # type: ignore[return-value]
        return label, self.options.default_variant

    def visit_container_directive(self, node: ContainerDirective) -> Node:
        """Replace a callout directive; descend into any other directive."""
        if node.name not in self.options.directive_names:
            return self.generic_visit(node)

        label, variant = self.classify(node)
        title = node.attributes.get("title") or self.options.title_override or ""
        icon = self.options.icons.get(variant, "")
        class_name = class_names(CALLOUT_STYLE.resolve(variant), "callout", f"callout-{label}")

        logger.debug("Callout label %r resolved to variant %r", label, variant)

        replacement = build_callout_node(node.children[1:], title, icon, class_name, node.source_location)
        replacement.metadata["variant"] = variant
        return replacement


__all__ = [
    "CALLOUT_STYLE",
    "CalloutTransform",
    "build_callout_node",
]
