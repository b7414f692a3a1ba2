#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the link-preview transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from docdirectives.constants import DEFAULT_LINK_PREVIEW_CLASS
from docdirectives.options.base import BaseTransformOptions
from docdirectives.utils.link_metadata import LinkMetadataSource


# src/docdirectives/options/link_preview.py
@dataclass(frozen=True)
class LinkPreviewOptions(BaseTransformOptions):
    """Configuration options for turning link-preview directives into cards.

    Parameters
    ----------
    class_name : str, default "link-preview"
        Extra classes appended to the card's class string
    exclude_domains : tuple of str, default ()
        Directives whose URL host (or, for a malformed URL, whose raw text)
        contains any of these substrings are left untouched. Compared
        lower-cased.
    fail_on_invalid_url : bool, default True
        Raise InvalidUrlError when a URL cannot be used. When False the
        failure is logged, recorded as a diagnostic and that one directive is
        left untouched while the rest of the document is transformed.
    metadata_source : callable or None, default None
        ``url -> LinkPreviewData``; None uses ``derive_link_preview``. Not
        settable from configuration files.

    """

    class_name: str = field(
        default=DEFAULT_LINK_PREVIEW_CLASS,
        metadata={"help": "Extra classes for link-preview cards"},
    )
    exclude_domains: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Host substrings whose link previews are left untouched"},
    )
    fail_on_invalid_url: bool = field(
        default=True,
        metadata={"help": "Raise on malformed link-preview URLs instead of skipping that directive"},
    )
    metadata_source: Optional[LinkMetadataSource] = field(
        default=None,
        compare=False,
        metadata={"help": "Callable deriving preview metadata from a URL", "config": False},
    )

    def __post_init__(self) -> None:
        """Normalize the exclusion list to a tuple of non-empty, lower-cased strings."""
        if isinstance(self.exclude_domains, str):
            domains: tuple[str, ...] = (self.exclude_domains,)
        else:
            domains = tuple(self.exclude_domains)
        self._set("exclude_domains", tuple(domain.strip().lower() for domain in domains if domain and domain.strip()))


__all__ = [
    "LinkPreviewOptions",
]
