#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for transform options.

Options are frozen dataclasses built once, when the pipeline is assembled.
A changed configuration is a new object (``create_updated``); nothing
mutates an options instance after construction.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docdirectives.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseTransformOptions(CloneFrozenMixin):
    """Base class for the options of a single directive transform.

    Subclasses declare their settings as frozen dataclass fields with a
    ``help`` entry in the field metadata.
    """

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build options from a plain mapping (e.g. a config file table).

        Parameters
        ----------
        data : mapping
            Field names and values. Only fields marked ``config`` in their
            metadata (the default) are accepted.

        Returns
        -------
        Self
            New options instance

        Raises
        ------
        ValidationError
            If the mapping contains unknown keys

        """
        allowed = {f.name for f in fields(cls) if f.metadata.get("config", True)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ValidationError(
                f"Unknown {cls.__name__} option(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=data[unknown[0]],
            )
        return cls(**dict(data))

    def _set(self, name: str, value: Any) -> None:
        """Normalize a field value during ``__post_init__``."""
        object.__setattr__(self, name, value)


__all__ = [
    "CloneFrozenMixin",
    "BaseTransformOptions",
]
