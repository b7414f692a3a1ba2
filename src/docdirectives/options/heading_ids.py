#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the heading identifier transform."""

from __future__ import annotations

from dataclasses import dataclass, field

from docdirectives.options.base import BaseTransformOptions


# src/docdirectives/options/heading_ids.py
@dataclass(frozen=True)
class HeadingIdOptions(BaseTransformOptions):
    """Configuration options for attaching identifiers to headings.

    Parameters
    ----------
    id_prefix : str, default ""
        Prefix prepended to every generated identifier

    """

    id_prefix: str = field(
        default="",
        metadata={"help": "Prefix for generated heading identifiers"},
    )


__all__ = [
    "HeadingIdOptions",
]
