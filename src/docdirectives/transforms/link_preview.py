#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/link_preview.py
"""Link-preview transform: leaf directives to link cards.

    ::link-preview{url="https://example.com/getting-started"}

Preview metadata comes from a link-metadata source (see
:mod:`docdirectives.utils.link_metadata`). The default source derives
everything from the URL itself and never performs network I/O.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from docdirectives.ast.nodes import LeafDirective, Node, RenderHint, Text
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.constants import (
    LINK_PREVIEW_BASE_CLASSES,
    LINK_PREVIEW_DETAIL_CLASSES,
    LINK_PREVIEW_DIRECTIVE_NAME,
    LINK_PREVIEW_REL,
    LINK_PREVIEW_TARGET,
)
from docdirectives.exceptions import InvalidUrlError
from docdirectives.options.link_preview import LinkPreviewOptions
from docdirectives.utils.classes import class_names
from docdirectives.utils.link_metadata import LinkPreviewData, derive_link_preview, parse_preview_url

logger = logging.getLogger(__name__)


def build_link_preview_node(url: str, data: LinkPreviewData, class_name: str = "") -> RenderHint:
    """Build the card that replaces a link-preview directive.

    Parameters
    ----------
    url : str
        Link target, used verbatim as ``href``
    data : LinkPreviewData
        Preview metadata
    class_name : str, default ""
        Configured extra classes

    Returns
    -------
    RenderHint
        ``a`` hint holding an ``img`` and a detail ``div`` with ``h3`` title
        and ``p`` domain

    """
    image = RenderHint(tag_name="img", attributes={"src": data.image, "alt": data.title})
    detail = RenderHint(
        tag_name="div",
        attributes={"class_name": LINK_PREVIEW_DETAIL_CLASSES},
        children=[
            RenderHint(tag_name="h3", children=[Text(data.title)]),
            RenderHint(tag_name="p", children=[Text(data.domain)]),
        ],
    )
    return RenderHint(
        tag_name="a",
        attributes={
            "href": url,
            "target": LINK_PREVIEW_TARGET,
            "rel": LINK_PREVIEW_REL,
            "class_name": class_names(LINK_PREVIEW_BASE_CLASSES, "link-preview", class_name),
        },
        children=[image, detail],
        hint_type="link_preview",
        metadata={"description": data.description},
    )


class LinkPreviewTransform(NodeTransformer):
    """Replace ``link-preview`` leaf directives with link cards.

    Directives that already have children are treated as manual overrides
    and left untouched, as are directives whose URL host contains one of the
    excluded domain substrings.

    An unusable ``url``, or any failure of the metadata source, raises
    :class:`InvalidUrlError` by default. With ``fail_on_invalid_url=False``
    the error is logged, appended to :attr:`diagnostics`, and only that
    directive is left untouched.

    Parameters
    ----------
    options : LinkPreviewOptions, optional
        Transform options; defaults to ``LinkPreviewOptions()``
    **kwargs
        Option overrides applied on top of ``options``

    Attributes
    ----------
    diagnostics : list of InvalidUrlError
        Failures isolated during the last ``transform`` call

    """

    def __init__(self, options: Optional[LinkPreviewOptions] = None, **kwargs: Any):
        options = options or LinkPreviewOptions()
        self.options = options.create_updated(**kwargs) if kwargs else options
        self._metadata_source = self.options.metadata_source or derive_link_preview
        self.diagnostics: list[InvalidUrlError] = []

    def transform(self, node: Node) -> Node:
        """Transform a tree in place, resetting diagnostics first."""
        self.diagnostics = []
        return super().transform(node)

    def is_excluded(self, url: Optional[str]) -> bool:
        """Return True if a URL matches any excluded domain substring.

        The host is matched when the URL parses; otherwise the raw URL text
        is, so an excluded link is left alone even when it is malformed.
        """
        if not url or not self.options.exclude_domains:
            return False
        try:
            target = parse_preview_url(url).hostname or ""
        except InvalidUrlError:
            target = url.strip().lower()
        return any(domain in target for domain in self.options.exclude_domains)

    def _fetch_metadata(self, url: str) -> LinkPreviewData:
        """Call the metadata source, reporting any failure as InvalidUrlError."""
        try:
            return self._metadata_source(url)
        except InvalidUrlError:
            raise
        except Exception as e:
            raise InvalidUrlError(url, f"Link metadata lookup failed for {url!r}: {e}", original_error=e) from e

    def visit_leaf_directive(self, node: LeafDirective) -> Node:
        """Replace a childless link-preview directive with a card."""
        if node.name != LINK_PREVIEW_DIRECTIVE_NAME or node.children:
            return node

        url = node.attributes.get("url")
        if self.is_excluded(url):
            logger.debug("Link preview for %s skipped: excluded domain", url)
            return node

        try:
            parse_preview_url(url)
            data = self._fetch_metadata(url.strip())  # type: ignore[union-attr]
        except InvalidUrlError as e:
            if self.options.fail_on_invalid_url:
                raise
            logger.warning("Skipping link preview: %s", e)
            self.diagnostics.append(e)
            return node

        replacement = build_link_preview_node(url, data, self.options.class_name)  # type: ignore[arg-type]
        replacement.source_location = node.source_location
        return replacement


__all__ = [
    "LinkPreviewTransform",
    "build_link_preview_node",
]
