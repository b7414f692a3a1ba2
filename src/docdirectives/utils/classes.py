#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/utils/classes.py
"""Class string composition for render hints.

Transforms decide structure, not styling: they only compose class strings
from configured fragments. ``class_names`` joins fragments, and
``VariantStyle`` maps a semantic variant name to its fragment on top of a
shared base.

Examples
--------
    >>> class_names("embed", None, "", "embed embed-youtube")
    'embed embed-youtube'

    >>> style = VariantStyle(base="box", variants={"info": "blue"}, default_variant="info")
    >>> style.resolve("info", "callout")
    'box blue callout'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


def class_names(*parts: Optional[str]) -> str:
    """Join class fragments into one class string.

    Falsy fragments are dropped and every fragment is split on whitespace.
    Repeated tokens keep their first position only.

    Parameters
    ----------
    *parts : str or None
        Class fragments, in order

    Returns
    -------
    str
        Space-separated class string

    """
    tokens: list[str] = []
    seen: set[str] = set()
    for part in parts:
        if not part:
            continue
        for token in part.split():
            if token not in seen:
                seen.add(token)
                tokens.append(token)
    return " ".join(tokens)


@dataclass(frozen=True)
class VariantStyle:
    """Base classes plus one class fragment per variant.

    Parameters
    ----------
    base : str
        Classes applied to every variant
    variants : mapping of str to str
        Variant name to class fragment
    default_variant : str
        Variant used when ``resolve`` is given a name with no fragment

    """

    base: str
    variants: Mapping[str, str] = field(default_factory=dict)
    default_variant: str = "default"

    def resolve(self, variant: Optional[str], *extra: Optional[str]) -> str:
        """Compose the class string for a variant.

        Parameters
        ----------
        variant : str or None
            Variant name; unknown names and None use ``default_variant``
        *extra : str or None
            Additional fragments appended after the variant fragment

        Returns
        -------
        str
            Composed class string

        """
        fragment = self.variants.get(variant or self.default_variant)
        if fragment is None:
            fragment = self.variants.get(self.default_variant, "")
        return class_names(self.base, fragment, *extra)


__all__ = [
    "class_names",
    "VariantStyle",
]
