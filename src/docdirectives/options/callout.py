#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the callout transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from docdirectives.constants import (
    CALLOUT_DIRECTIVE_NAME,
    CALLOUT_VARIANTS,
    DEFAULT_CALLOUT_ICONS,
    DEFAULT_CALLOUT_VARIANT,
    CalloutVariant,
)
from docdirectives.exceptions import ValidationError
from docdirectives.options.base import BaseTransformOptions


# src/docdirectives/options/callout.py
@dataclass(frozen=True)
class CalloutOptions(BaseTransformOptions):
    """Configuration options for turning callout directives into containers.

    Parameters
    ----------
    directive_names : frozenset of str, default {"callout"}
        Container directive names handled as callouts
    default_variant : {"default", "info", "warning", "success", "danger"}, default "default"
        Variant used when the classification label is not recognized
    title_override : str or None, default None
        Title used when a callout has no (or an empty) ``title`` attribute
    aliases : mapping of str to str, default empty
        Extra classification labels mapped to a variant (e.g. ``{"note": "info"}``).
        Keys are compared lower-cased.
    icons : mapping of str to str, default built-in glyphs
        Variant to icon glyph. A variant missing from the mapping gets an
        empty icon.

    """

    directive_names: frozenset[str] = field(
        default=frozenset({CALLOUT_DIRECTIVE_NAME}),
        metadata={"help": "Container directive names handled as callouts"},
    )
    default_variant: CalloutVariant = field(
        default=DEFAULT_CALLOUT_VARIANT,
        metadata={"help": "Variant used for unrecognized labels", "choices": list(CALLOUT_VARIANTS)},
    )
    title_override: Optional[str] = field(
        default=None,
        metadata={"help": "Title used when the directive has no title attribute"},
    )
    aliases: Mapping[str, str] = field(
        default_factory=dict,
        metadata={"help": "Extra labels mapped to a variant, e.g. note=info"},
    )
    icons: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CALLOUT_ICONS),
        metadata={"help": "Icon glyph per variant"},
    )

    def __post_init__(self) -> None:
        """Validate variants and freeze the mappings.

        Raises
        ------
        ValidationError
            If a variant name is not one of the five callout variants, or no
            directive name is configured.

        """
        if isinstance(self.directive_names, str):
            self._set("directive_names", frozenset({self.directive_names}))
        else:
            self._set("directive_names", frozenset(self.directive_names))
        if not self.directive_names:
            raise ValidationError("At least one callout directive name is required", parameter_name="directive_names")

        if self.default_variant not in CALLOUT_VARIANTS:
            raise ValidationError(
                f"default_variant must be one of {', '.join(CALLOUT_VARIANTS)}, got {self.default_variant!r}",
                parameter_name="default_variant",
                parameter_value=self.default_variant,
            )

        aliases = {str(label).strip().lower(): variant for label, variant in self.aliases.items()}
        for label, variant in aliases.items():
            if variant not in CALLOUT_VARIANTS:
                raise ValidationError(
                    f"Alias {label!r} maps to unknown variant {variant!r}",
                    parameter_name="aliases",
                    parameter_value=dict(self.aliases),
                )
        self._set("aliases", MappingProxyType(aliases))
        self._set("icons", MappingProxyType(dict(self.icons)))


__all__ = [
    "CalloutOptions",
]
