#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options and provider table for the embed transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from docdirectives.constants import VIMEO_EMBED_TEMPLATE, YOUTUBE_EMBED_TEMPLATE
from docdirectives.exceptions import ValidationError
from docdirectives.options.base import BaseTransformOptions


@dataclass(frozen=True)
class EmbedProvider:
    """How one embed provider turns a directive ``id`` into an iframe source.

    Parameters
    ----------
    hint_type : str
        Label stored on the produced RenderHint (e.g. ``"embed_youtube"``)
    src : callable
        Maps the trimmed ``id`` attribute to the iframe ``src`` URL
    default_class_name : str
        Provider classes added to every embed of this provider

    """

    hint_type: str
    src: Callable[[str], str]
    default_class_name: str

    @classmethod
    def from_template(cls, key: str, template: str, default_class_name: Optional[str] = None) -> EmbedProvider:
        """Build a provider from a URL template with an ``{id}`` placeholder.

        Parameters
        ----------
        key : str
            Provider key, used for the hint type and default classes
        template : str
            Source URL template, e.g. ``"https://www.youtube.com/embed/{id}"``
        default_class_name : str, optional
            Provider classes; defaults to ``"embed embed-{key}"``

        Returns
        -------
        EmbedProvider
            The provider

        Raises
        ------
        ValidationError
            If the template has no ``{id}`` placeholder

        """
        if "{id}" not in template:
            raise ValidationError(
                f"Embed template for {key!r} must contain an '{{id}}' placeholder",
                parameter_name="providers",
                parameter_value=template,
            )
        return cls(
            hint_type=f"embed_{key}",
            src=lambda embed_id: template.replace("{id}", embed_id),
            default_class_name=default_class_name if default_class_name is not None else f"embed embed-{key}",
        )


DEFAULT_EMBED_PROVIDERS: Mapping[str, EmbedProvider] = MappingProxyType(
    {
        "youtube": EmbedProvider.from_template("youtube", YOUTUBE_EMBED_TEMPLATE),
        "vimeo": EmbedProvider.from_template("vimeo", VIMEO_EMBED_TEMPLATE),
        "iframe": EmbedProvider.from_template("iframe", "{id}"),
    }
)


def _coerce_provider(key: str, value: Any) -> EmbedProvider:
    """Accept a provider, a template string or a ``{template, class_name}`` table."""
    if isinstance(value, EmbedProvider):
        return value
    if isinstance(value, str):
        return EmbedProvider.from_template(key, value)
    if isinstance(value, Mapping) and "template" in value:
        return EmbedProvider.from_template(key, value["template"], value.get("class_name"))
    raise ValidationError(
        f"Embed provider {key!r} must be an EmbedProvider, a template string or a table with 'template'",
        parameter_name="providers",
        parameter_value=value,
    )


# src/docdirectives/options/embed.py
@dataclass(frozen=True)
class EmbedOptions(BaseTransformOptions):
    """Configuration options for turning embed directives into iframes.

    Parameters
    ----------
    providers : mapping of str to EmbedProvider, default empty
        Additional providers. An entry whose key matches a built-in
        (``youtube``, ``vimeo``, ``iframe``) replaces it entirely; nothing is
        merged field by field. Values may also be template strings or
        ``{"template": ..., "class_name": ...}`` tables, as read from
        configuration files.

    """

    providers: Mapping[str, EmbedProvider] = field(
        default_factory=dict,
        metadata={"help": "Additional or overriding embed providers, key=URL template with {id}"},
    )

    def __post_init__(self) -> None:
        """Normalize provider entries and freeze the table."""
        providers = {str(key): _coerce_provider(str(key), value) for key, value in self.providers.items()}
        self._set("providers", MappingProxyType(providers))

    @property
    def provider_table(self) -> Mapping[str, EmbedProvider]:
        """Built-in providers with the configured providers laid over them."""
        return MappingProxyType({**DEFAULT_EMBED_PROVIDERS, **self.providers})


__all__ = [
    "EmbedProvider",
    "EmbedOptions",
    "DEFAULT_EMBED_PROVIDERS",
]
