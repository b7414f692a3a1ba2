#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/metadata.py
"""Metadata classes for directive transforms.

Transform metadata is what the registry stores and what plugins export
through the ``docdirectives.transforms`` entry-point group. It ties a
registered name to a transform class, the options dataclass the class is
configured with, and the keyword parameters it accepts.

Examples
--------
Describe a plugin transform:

    >>> from docdirectives.transforms import TransformMetadata, ParameterSpec
    >>> from docdirectives.ast.transforms import NodeTransformer
    >>>
    >>> class StripCommentsTransform(NodeTransformer):
    ...     def __init__(self, options=None, marker: str = "%"):
    ...         self.marker = marker
    ...
    >>> METADATA = TransformMetadata(
    ...     name="strip-comments",
    ...     description="Remove comment paragraphs",
    ...     transformer_class=StripCommentsTransform,
    ...     parameters={"marker": ParameterSpec(type=str, default="%", help="Comment marker")},
    ... )

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type

from docdirectives.ast.transforms import NodeTransformer
from docdirectives.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class ParameterSpec:
    """Specification for a keyword parameter of a transform.

    Parameters
    ----------
    type : type
        Python type of the parameter (e.g., str, bool, list, dict)
    default : Any, optional
        Documented default value
    help : str, optional
        Help text describing the parameter
    required : bool, default = False
        Whether this parameter is required
    choices : list, optional
        List of valid choices for this parameter
    validator : callable, optional
        Custom validation function: takes value, returns bool
    element_type : type, optional
        For list parameters, the expected type of list elements

    Examples
    --------
        >>> param = ParameterSpec(
        ...     type=str,
        ...     default="default",
        ...     choices=["default", "info", "warning", "success", "danger"],
        ...     help="Variant used for unrecognized labels"
        ... )

    """

    type: Type
    default: Any = None
    help: str = ""
    required: bool = False
    choices: Optional[list[Any]] = None
    validator: Optional[Callable[[Any], bool]] = None
    element_type: Optional[Type] = None

    def validate(self, name: str, value: Any) -> None:
        """Validate a parameter value.

        Parameters
        ----------
        name : str
            Parameter name, used in error messages
        value : Any
            Value to validate. For list types, tuples and frozensets are
            accepted as well.

        Raises
        ------
        ValidationError
            If the value is invalid

        """
        if self.type is list and isinstance(value, (tuple, set, frozenset)):
            value = list(value)

        if not isinstance(value, self.type):
            raise ValidationError(
                f"Parameter '{name}' expects {self.type.__name__}, got {type(value).__name__}",
                parameter_name=name,
                parameter_value=value,
            )

        if self.type is list and self.element_type is not None:
            for i, element in enumerate(value):
                if not isinstance(element, self.element_type):
                    raise ValidationError(
                        f"Parameter '{name}' element at index {i} has wrong type: "
                        f"expected {self.element_type.__name__}, got {type(element).__name__}",
                        parameter_name=name,
                        parameter_value=value,
                    )

        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{name}' must be one of {self.choices}, got {value!r}",
                parameter_name=name,
                parameter_value=value,
            )

        if self.validator is not None and not self.validator(value):
            raise ValidationError(
                f"Validation failed for parameter '{name}': {value!r}",
                parameter_name=name,
                parameter_value=value,
            )


@dataclass
class TransformMetadata:
    """Metadata for a registered transform.

    Parameters
    ----------
    name : str
        Unique identifier for the transform (e.g., "callout")
    description : str
        Human-readable description of what the transform does
    transformer_class : type[NodeTransformer]
        The transform class (must inherit from NodeTransformer)
    options_field : str, optional
        Name of the ``PipelineOptions`` section that configures this
        transform. Plugins without pipeline options leave it unset.
    parameters : dict[str, ParameterSpec], default = empty dict
        Keyword parameters accepted by the transform constructor
    version : str, default = "1.0.0"
        Transform version
    author : str, optional
        Transform author or maintainer
    tags : list[str], default = empty list
        Tags for categorization (e.g., ["directives", "media"])

    """

    name: str
    description: str
    transformer_class: Type[NodeTransformer]
    options_field: Optional[str] = None
    parameters: dict[str, ParameterSpec] = field(default_factory=dict)
    version: str = "1.0.0"
    author: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate metadata after initialization."""
        if not self.name:
            raise ValueError("Transform name cannot be empty")

        if not issubclass(self.transformer_class, NodeTransformer):
            raise ValueError(
                f"transformer_class must inherit from NodeTransformer, got {self.transformer_class.__name__}"
            )

    def create_instance(self, options: Any = None, **kwargs: Any) -> NodeTransformer:
        """Create an instance of the transform.

        Parameters
        ----------
        options : Any, optional
            Options object passed as the first constructor argument
        **kwargs
            Keyword parameters, validated against ``parameters``

        Returns
        -------
        NodeTransformer
            Transform instance

        Raises
        ------
        ValidationError
            If a parameter is missing, invalid, or rejected by the class

        """
        validated_params: dict[str, Any] = {}
        for param_name, param_spec in self.parameters.items():
            if param_name in kwargs:
                param_spec.validate(param_name, kwargs[param_name])
                validated_params[param_name] = kwargs[param_name]
            elif param_spec.required:
                raise ValidationError(
                    f"Transform '{self.name}' requires parameter '{param_name}'", parameter_name=param_name
                )

        unknown_params = set(kwargs) - set(self.parameters)
        if unknown_params:
            logger.warning(
                "Transform '%s' received unknown parameter(s): %s. These will be ignored. Valid parameters are: %s",
                self.name,
                ", ".join(sorted(unknown_params)),
                ", ".join(sorted(self.parameters)),
            )

        try:
            if options is None:
                return self.transformer_class(**validated_params)
            return self.transformer_class(options, **validated_params)
        except TypeError as e:
            raise ValidationError(f"Failed to create transform '{self.name}': {e}", original_error=e) from e

    def get_parameter_names(self) -> list[str]:
        """Get list of parameter names."""
        return list(self.parameters.keys())


__all__ = [
    "ParameterSpec",
    "TransformMetadata",
]
