#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pipeline-wide configuration aggregating the options of every transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from docdirectives.exceptions import ValidationError
from docdirectives.options.base import CloneFrozenMixin
from docdirectives.options.callout import CalloutOptions
from docdirectives.options.embed import EmbedOptions
from docdirectives.options.heading_ids import HeadingIdOptions
from docdirectives.options.link_preview import LinkPreviewOptions

DEFAULT_TRANSFORMS: tuple[str, ...] = ("callout", "embed", "link-preview", "heading-ids")

_SECTIONS: dict[str, type] = {
    "callout": CalloutOptions,
    "embed": EmbedOptions,
    "link_preview": LinkPreviewOptions,
    "heading_ids": HeadingIdOptions,
}


# src/docdirectives/options/pipeline.py
@dataclass(frozen=True)
class PipelineOptions(CloneFrozenMixin):
    """Configuration for a full directive pipeline run.

    Parameters
    ----------
    transforms : tuple of str, default all four built-ins
        Registered transform names to run, in order
    callout : CalloutOptions
        Callout transform options
    embed : EmbedOptions
        Embed transform options
    link_preview : LinkPreviewOptions
        Link-preview transform options
    heading_ids : HeadingIdOptions
        Heading identifier transform options

    Examples
    --------
    >>> options = PipelineOptions.from_dict({
    ...     "callout": {"default_variant": "info", "aliases": {"note": "info"}},
    ...     "link_preview": {"exclude_domains": ["example.com"]},
    ... })

    """

    transforms: tuple[str, ...] = field(
        default=DEFAULT_TRANSFORMS,
        metadata={"help": "Transform names to run, in order"},
    )
    callout: CalloutOptions = field(default_factory=CalloutOptions)
    embed: EmbedOptions = field(default_factory=EmbedOptions)
    link_preview: LinkPreviewOptions = field(default_factory=LinkPreviewOptions)
    heading_ids: HeadingIdOptions = field(default_factory=HeadingIdOptions)

    def __post_init__(self) -> None:
        """Normalize the transform list to a tuple."""
        if isinstance(self.transforms, str):
            object.__setattr__(self, "transforms", (self.transforms,))
        else:
            object.__setattr__(self, "transforms", tuple(self.transforms))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PipelineOptions:
        """Build pipeline options from a nested mapping.

        Parameters
        ----------
        data : mapping
            Optional ``transforms`` list plus one table per transform
            (``callout``, ``embed``, ``link_preview``, ``heading_ids``)

        Returns
        -------
        PipelineOptions
            New options instance

        Raises
        ------
        ValidationError
            If a key is unknown or a section is not a table

        """
        unknown = sorted(set(data) - set(_SECTIONS) - {"transforms"})
        if unknown:
            raise ValidationError(
                f"Unknown configuration section(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=data[unknown[0]],
            )

        kwargs: dict[str, Any] = {}
        if "transforms" in data:
            kwargs["transforms"] = data["transforms"]
        for section, options_class in _SECTIONS.items():
            if section not in data:
                continue
            table = data[section]
            if not isinstance(table, Mapping):
                raise ValidationError(
                    f"Configuration section '{section}' must be a table, got {type(table).__name__}",
                    parameter_name=section,
                    parameter_value=table,
                )
            kwargs[section] = options_class.from_dict(table)
        return cls(**kwargs)


__all__ = [
    "DEFAULT_TRANSFORMS",
    "PipelineOptions",
]
