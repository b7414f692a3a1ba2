#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used by every directive
transform, plus a validating visitor that checks the tree is still well
formed after transforms have spliced replacement nodes into it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from docdirectives.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    ContainerDirective,
    Document,
    Emphasis,
    Heading,
    Image,
    LeafDirective,
    Link,
    Node,
    Paragraph,
    RenderHint,
    Strong,
    Text,
    TextDirective,
    get_child_list,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for every node type. Dispatch goes
    through ``node.accept(visitor)``, so a visitor never probes node fields
    to find out what it is looking at.

    Examples
    --------
    Simple visitor that collects directive names:

        >>> class DirectiveNames(NodeTransformer):
        ...     def __init__(self):
        ...         self.names = []
        ...
        ...     def visit_leaf_directive(self, node):
        ...         self.names.append(node.name)
        ...         return node

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_container_directive(self, node: ContainerDirective) -> Any:
        """Visit a ContainerDirective node."""
        pass

    @abstractmethod
    def visit_leaf_directive(self, node: LeafDirective) -> Any:
        """Visit a LeafDirective node."""
        pass

    @abstractmethod
    def visit_text_directive(self, node: TextDirective) -> Any:
        """Visit a TextDirective node."""
        pass

    @abstractmethod
    def visit_render_hint(self, node: RenderHint) -> Any:
        """Visit a RenderHint node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


class ValidationVisitor(NodeVisitor):
    """Visitor that checks a tree is well formed.

    Checks performed:
    - heading levels are between 1 and 6
    - directives have a non-empty name and string attribute values
    - leaf directives hold at most one child, and that child is Text
    - render hints have a tag name
    - no node instance is reachable from two positions (a splice that
      leaves a node both in the replacement and in its old parent)

    Parameters
    ----------
    strict : bool, default = True
        Whether to raise ValueError on the first failure. When False the
        messages are only collected in ``errors``.

    Examples
    --------
    >>> validator = ValidationVisitor(strict=False)
    >>> doc.accept(validator)
    >>> validator.errors
    []

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []
        self._seen: set[int] = set()

    def _add_error(self, message: str) -> None:
        self.errors.append(message)
        if self.strict:
            raise ValueError(message)

    def _enter(self, node: Node) -> None:
        if id(node) in self._seen:
            self._add_error(f"{type(node).__name__} node is referenced from more than one position")
        self._seen.add(id(node))

    def _visit_children(self, node: Node) -> None:
        self._enter(node)
        for child in get_child_list(node):
            child.accept(self)

    def _validate_directive(self, node: ContainerDirective | LeafDirective | TextDirective) -> None:
        if not node.name:
            self._add_error(f"{type(node).__name__} has an empty name")
        for key, value in node.attributes.items():
            if not isinstance(value, str):
                self._add_error(
                    f"Directive '{node.name}' attribute '{key}' must be a string, got {type(value).__name__}"
                )

    def visit_document(self, node: Document) -> None:
        """Validate a Document node."""
        self._visit_children(node)

    def visit_heading(self, node: Heading) -> None:
        """Validate a Heading node."""
        if not 1 <= node.level <= 6:
            self._add_error(f"Invalid heading level: {node.level}")
        self._visit_children(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Validate a Paragraph node."""
        self._visit_children(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Validate a BlockQuote node."""
        self._visit_children(node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Validate a CodeBlock node."""
        self._enter(node)

    def visit_text(self, node: Text) -> None:
        """Validate a Text node."""
        self._enter(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Validate an Emphasis node."""
        self._visit_children(node)

    def visit_strong(self, node: Strong) -> None:
        """Validate a Strong node."""
        self._visit_children(node)

    def visit_code(self, node: Code) -> None:
        """Validate a Code node."""
        self._enter(node)

    def visit_link(self, node: Link) -> None:
        """Validate a Link node."""
        self._visit_children(node)

    def visit_image(self, node: Image) -> None:
        """Validate an Image node."""
        self._enter(node)

    def visit_container_directive(self, node: ContainerDirective) -> None:
        """Validate a ContainerDirective node."""
        self._validate_directive(node)
        self._visit_children(node)

    def visit_leaf_directive(self, node: LeafDirective) -> None:
        """Validate a LeafDirective node."""
        self._validate_directive(node)
        if len(node.children) > 1:
            self._add_error(f"Leaf directive '{node.name}' has {len(node.children)} children, at most 1 allowed")
        for child in node.children:
            if not isinstance(child, Text):
                self._add_error(f"Leaf directive '{node.name}' child must be Text, got {type(child).__name__}")
        self._visit_children(node)

    def visit_text_directive(self, node: TextDirective) -> None:
        """Validate a TextDirective node."""
        self._validate_directive(node)
        self._visit_children(node)

    def visit_render_hint(self, node: RenderHint) -> None:
        """Validate a RenderHint node."""
        if not node.tag_name:
            self._add_error("RenderHint has an empty tag name")
        self._visit_children(node)


__all__ = [
    "NodeVisitor",
    "ValidationVisitor",
]
