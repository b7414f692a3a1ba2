#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/utils/text.py
"""Text processing utilities for directive transforms.

Functions
---------
slugify : Convert text to a URL-safe identifier

Examples
--------
    >>> from docdirectives.utils.text import slugify
    >>> slugify("Getting Started!")
    'getting-started'

    >>> slugify("My Heading Title", separator="_")
    'my_heading_title'

"""

from __future__ import annotations

import re
import unicodedata

_STRICT_DISALLOWED = re.compile(r"[^a-z0-9\s\-]")
_WHITESPACE_OR_HYPHEN_RUN = re.compile(r"[\s\-]+")


def slugify(text: str, *, separator: str = "-") -> str:
    """Create a URL-safe slug from text.

    The result is deterministic and depends on nothing but ``text``:
    - Unicode is NFD-normalized and combining marks are dropped
    - the text is lower-cased
    - every character other than ASCII letters, digits, whitespace and
      hyphens is removed (strict mode)
    - runs of whitespace and hyphens collapse to one separator
    - leading and trailing separators are stripped

    No uniqueness is enforced; equal inputs give equal slugs. Text with no
    usable characters gives an empty string.

    Symbols are dropped, never spelled out: ``"C++ & Rust"`` gives
    ``"c-rust"``, not ``"c-and-rust"`` as slug libraries with a replacement
    table do. Trailing separators are always stripped, so ``"Hello -"``
    gives ``"hello"``.

    Parameters
    ----------
    text : str
        Text to slugify (e.g., heading text)
    separator : str, default = "-"
        The separator between words in the slug

    Returns
    -------
    str
        URL-safe slug

    Examples
    --------
        >>> slugify("API Reference (v2.0)")
        'api-reference-v20'

        >>> slugify("Café résumé")
        'cafe-resume'

        >>> slugify("  multiple   --  dashes ")
        'multiple-dashes'

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = _STRICT_DISALLOWED.sub("", slug)
    slug = _WHITESPACE_OR_HYPHEN_RUN.sub(separator, slug)

    return slug.strip(separator)


__all__ = [
    "slugify",
]
