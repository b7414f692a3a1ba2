#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/utils/__init__.py
"""Utility modules for the docdirectives package.

This package contains the pure helper functions the transforms delegate to:
slug generation for heading identifiers and class string composition.
"""

from docdirectives.utils.classes import VariantStyle, class_names
from docdirectives.utils.text import slugify

__all__ = [
    "class_names",
    "slugify",
    "VariantStyle",
]
