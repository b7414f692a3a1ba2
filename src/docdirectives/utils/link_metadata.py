#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/utils/link_metadata.py
"""Link metadata derivation for link-preview cards.

A link-metadata source is any callable taking a URL and returning a
:class:`LinkPreviewData`, raising :class:`InvalidUrlError` when the URL
cannot be used. The default source, :func:`derive_link_preview`, never
touches the network: it derives a title, domain and icon from the URL alone.

Examples
--------
    >>> data = derive_link_preview("https://www.example.com/getting-started")
    >>> data.title, data.domain
    ('Getting Started', 'example.com')

"""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from typing import Callable
from urllib.parse import SplitResult, urlsplit

from docdirectives.constants import LINK_PREVIEW_ICON_SERVICE
from docdirectives.exceptions import InvalidUrlError


@dataclass(frozen=True)
class LinkPreviewData:
    """Metadata shown on a link-preview card.

    Parameters
    ----------
    title : str
        Card heading
    description : str
        Short description of the link target
    image : str
        Image URL shown on the card
    domain : str
        Display domain (host without a leading ``www.``)

    """

    title: str
    description: str
    image: str
    domain: str


LinkMetadataSource = Callable[[str], LinkPreviewData]

# One DNS label after IDNA encoding
_HOST_LABEL = re.compile(r"^[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?$")


def is_valid_hostname(hostname: str, bracketed: bool = False) -> bool:
    """Return True if ``hostname`` is a usable host name or IP address.

    Parameters
    ----------
    hostname : str
        Host as returned by ``urlsplit(...).hostname`` (lower-cased, without
        brackets or port)
    bracketed : bool, default False
        True when the URL wrote the host in brackets; only IPv6 literals are
        accepted then

    Examples
    --------
        >>> is_valid_hostname("docs.python.org")
        True
        >>> is_valid_hostname("exa mple.com")
        False

    """
    if bracketed:
        try:
            return isinstance(ipaddress.ip_address(hostname), ipaddress.IPv6Address)
        except ValueError:
            return False

    try:
        encoded = hostname.encode("idna").decode("ascii")
    except UnicodeError:
        return False

    labels = encoded[:-1].split(".") if encoded.endswith(".") else encoded.split(".")
    return all(_HOST_LABEL.match(label) for label in labels)


def parse_preview_url(url: str | None) -> SplitResult:
    """Parse an absolute URL, raising InvalidUrlError when it is unusable.

    Parameters
    ----------
    url : str or None
        Candidate URL

    Returns
    -------
    SplitResult
        Parsed URL with a scheme and a host

    Raises
    ------
    InvalidUrlError
        If the URL is missing, relative or unparsable, or its host is malformed

    """
    if not url or not url.strip():
        raise InvalidUrlError(url, "Link preview URL is missing")

    try:
        parsed = urlsplit(url.strip())
        # Accessing port validates it; urlsplit alone accepts "host:abc"
        _ = parsed.port
    except ValueError as e:
        raise InvalidUrlError(url, f"Invalid URL {url!r}: {e}", original_error=e) from e

    if not parsed.scheme or not parsed.hostname:
        raise InvalidUrlError(url, f"Invalid URL {url!r}: an absolute URL with a host is required")

    if not is_valid_hostname(parsed.hostname, bracketed="[" in parsed.netloc):
        raise InvalidUrlError(url, f"Invalid URL {url!r}: malformed host {parsed.hostname!r}")

    return parsed


def strip_www(hostname: str) -> str:
    """Drop a leading ``www.`` from a hostname."""
    return hostname[4:] if hostname.startswith("www.") else hostname


def title_from_slug(segment: str) -> str:
    """Turn a hyphenated path segment into a title.

    Each hyphen-separated word gets an upper-cased first character; the rest
    of the word is kept as written.

    Examples
    --------
        >>> title_from_slug("some-page")
        'Some Page'

    """
    return " ".join(word[:1].upper() + word[1:] for word in segment.split("-"))


def derive_link_preview(url: str) -> LinkPreviewData:
    """Derive preview metadata from a URL without fetching it.

    Parameters
    ----------
    url : str
        Absolute URL of the link target

    Returns
    -------
    LinkPreviewData
        Title from the last path segment (or the domain), a description
        naming the domain, and an icon-service image for the domain

    Raises
    ------
    InvalidUrlError
        If the URL cannot be parsed

    """
    parsed = parse_preview_url(url)
    domain = strip_www(parsed.hostname or "")

    segments = [segment for segment in parsed.path.split("/") if segment]
    last_segment = segments[-1] if segments else domain

    return LinkPreviewData(
        title=title_from_slug(last_segment),
        description=f"A link to {domain}",
        image=LINK_PREVIEW_ICON_SERVICE.format(domain=domain),
        domain=domain,
    )


__all__ = [
    "LinkPreviewData",
    "LinkMetadataSource",
    "parse_preview_url",
    "strip_www",
    "title_from_slug",
    "derive_link_preview",
    "is_valid_hostname",
]
