#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/pipeline.py
"""Pipeline that runs directive transforms over a document.

Each transform makes one pre-order pass over the tree and the next
transform sees the already-mutated tree. The built-in transforms match
disjoint node kinds, so their relative order does not change the result.

Examples
--------
Run every built-in transform with default options:

    >>> from docdirectives.transforms import apply
    >>> doc = apply(doc)

Run selected transforms with configuration:

    >>> from docdirectives.options import PipelineOptions
    >>> options = PipelineOptions.from_dict({"link_preview": {"exclude_domains": ["example.com"]}})
    >>> pipeline = Pipeline(transforms=["link-preview", "heading-ids"], options=options)
    >>> doc = pipeline.execute(doc)

"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

from docdirectives.ast.nodes import Document, Node
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.ast.visitors import ValidationVisitor
from docdirectives.exceptions import DirectiveError, TransformError, ValidationError
from docdirectives.options.pipeline import PipelineOptions
from docdirectives.transforms.registry import transform_registry

logger = logging.getLogger(__name__)

TransformSpec = Union[str, NodeTransformer]


class Pipeline:
    """Ordered sequence of directive transforms.

    Parameters
    ----------
    transforms : list of str or NodeTransformer, optional
        Transforms to run, in order. Names are resolved through the
        transform registry and configured from the matching section of
        ``options``. Defaults to ``options.transforms``.
    options : PipelineOptions, optional
        Options for every built-in transform
    validate : bool, default = False
        Check the transformed tree with :class:`ValidationVisitor` and raise
        ValidationError if it is not well formed

    Attributes
    ----------
    diagnostics : list of DirectiveError
        Per-directive failures isolated during the last run (e.g. skipped
        link previews when ``fail_on_invalid_url`` is False)
    replacements : dict of str to int
        Number of nodes each transform replaced during the last run

    """

    def __init__(
        self,
        transforms: Optional[Sequence[TransformSpec]] = None,
        options: Optional[PipelineOptions] = None,
        validate: bool = False,
    ):
        self.options = options or PipelineOptions()
        self.transforms: list[TransformSpec] = list(transforms if transforms is not None else self.options.transforms)
        self.validate = validate
        self.registry = transform_registry
        self.diagnostics: list[DirectiveError] = []
        self.replacements: dict[str, int] = {}

    def _resolve_transform(self, spec: TransformSpec) -> NodeTransformer:
        """Turn a transform name into a configured instance."""
        if isinstance(spec, NodeTransformer):
            return spec
        if not isinstance(spec, str):
            raise TypeError(f"Transform must be str or NodeTransformer, got {type(spec).__name__}")

        try:
            metadata = self.registry.get_metadata(spec)
        except KeyError as e:
            available = ", ".join(self.registry.list_transforms())
            raise ValidationError(
                f"Unknown transform '{spec}'. Available transforms: {available}",
                parameter_name="transforms",
                parameter_value=spec,
                original_error=e,
            ) from e

        options = getattr(self.options, metadata.options_field) if metadata.options_field else None
        return metadata.create_instance(options)

    def resolve_transforms(self) -> list[NodeTransformer]:
        """Resolve every configured transform to an instance.

        Raises
        ------
        ValidationError
            If a transform name is not registered
        TypeError
            If an entry is neither a name nor a NodeTransformer

        """
        resolved = [self._resolve_transform(spec) for spec in self.transforms]
        logger.debug("Resolved %d transform(s) for execution", len(resolved))
        return resolved

    def execute(self, document: Node) -> Node:
        """Run every transform over a document, in order.

        Parameters
        ----------
        document : Node
            Root of the tree, usually a Document. It is mutated in place.

        Returns
        -------
        Node
            The transformed root

        Raises
        ------
        InvalidUrlError
            If a link preview URL is unusable and ``fail_on_invalid_url`` is set
        TransformError
            If a transform fails with an unexpected exception
        ValidationError
            If ``validate`` is set and the result is not well formed

        """
        self.diagnostics = []
        self.replacements = {}
        result = document

        for transformer in self.resolve_transforms():
            name = type(transformer).__name__
            logger.debug("Applying transform: %s", name)
            try:
                result = transformer.transform(result)
            except DirectiveError:
                raise
            except Exception as e:
                logger.error("Transform %s failed: %s", name, e, exc_info=True)
                raise TransformError(f"Transform {name} failed: {e}", transform_name=name, original_error=e) from e

            self.replacements[name] = self.replacements.get(name, 0) + transformer.replacements
            self.diagnostics.extend(getattr(transformer, "diagnostics", []))

        if self.validate:
            self._validate(result)

        logger.info(
            "Applied %d transform(s): %d replacement(s), %d diagnostic(s)",
            len(self.transforms),
            sum(self.replacements.values()),
            len(self.diagnostics),
        )
        return result

    def _validate(self, node: Node) -> None:
        validator = ValidationVisitor(strict=False)
        node.accept(validator)
        if validator.errors:
            raise ValidationError(
                f"Transformed tree is not well formed: {'; '.join(validator.errors)}",
                parameter_name="document",
            )


def apply(
    document: Document,
    transforms: Optional[Sequence[TransformSpec]] = None,
    options: Optional[PipelineOptions] = None,
    **kwargs: Any,
) -> Node:
    """Apply directive transforms to a document.

    Parameters
    ----------
    document : Document
        Parsed document; mutated in place
    transforms : list of str or NodeTransformer, optional
        Transforms to run; defaults to ``options.transforms``
    options : PipelineOptions, optional
        Options for the built-in transforms
    **kwargs
        Passed to :class:`Pipeline` (e.g. ``validate=True``)

    Returns
    -------
    Node
        The transformed document

    Examples
    --------
        >>> doc = apply(doc, transforms=["callout", HeadingIdTransform(id_prefix="doc-")])

    """
    return Pipeline(transforms=transforms, options=options, **kwargs).execute(document)


__all__ = [
    "Pipeline",
    "TransformSpec",
    "apply",
]
