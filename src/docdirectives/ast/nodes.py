#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/ast/nodes.py
"""AST node classes for directive-aware document trees.

This module defines the node hierarchy consumed and produced by the directive
transforms. Trees arrive already parsed: directive syntax has been recognized
and typed as container, leaf or text directives before any transform runs.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, BlockQuote, CodeBlock

Inline nodes:
    - Text, Emphasis, Strong, Code, Link, Image

Directive nodes (parser output for extension syntax):
    - ContainerDirective: arbitrary nested children (e.g. callouts)
    - LeafDirective: at most one plain-text child (e.g. embeds, previews)
    - TextDirective: inline directive form

Output nodes:
    - RenderHint: tag name, attributes and ordered children for a renderer

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format (e.g., 'markdown', 'mdx')
    line : int or None, default = None
        Line number in source document
    column : int or None, default = None
        Column number in source document
    metadata : dict, default = empty dict
        Additional parser-specific location information

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and transformation.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node (render metadata such
        as a heading ``id`` lives here)
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata; the heading identifier pass stores ``id`` here
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language specification.

    Parameters
    ----------
    content : str
        Raw code content
    language : str or None, default = None
        Info-string language

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


# ============================================================================
# Directive Nodes
# ============================================================================


@dataclass
class DirectiveNode(Node):
    """Base class for parsed extension directives.

    The parser populates ``name`` with the matched keyword and ``attributes``
    with the raw ``{key=value}`` pairs. Attribute keys are case-sensitive and
    values are not validated; each transform validates what it consumes.

    Parameters
    ----------
    name : str
        Directive keyword (e.g. ``"callout"``)
    attributes : dict of str to str, default = empty dict
        Raw directive attributes
    children : list of Node, default = empty list
        Directive content; its allowed shape depends on the directive kind
    metadata : dict, default = empty dict
        Directive metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class ContainerDirective(DirectiveNode):
    """Block directive with arbitrary nested children (``:::name ... :::``)."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_container_directive``."""
        return visitor.visit_container_directive(self)


@dataclass
class LeafDirective(DirectiveNode):
    """Block directive restricted to at most one plain-text child (``::name[label]``)."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_leaf_directive``."""
        return visitor.visit_leaf_directive(self)


@dataclass
class TextDirective(DirectiveNode):
    """Inline directive (``:name[label]``)."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text_directive``."""
        return visitor.visit_text_directive(self)


# ============================================================================
# Output Nodes
# ============================================================================


@dataclass
class RenderHint(Node):
    """Renderable replacement node produced by the directive transforms.

    A RenderHint tells a downstream renderer which element to emit, with
    which attributes, around which children. Transforms never emit markup
    text themselves.

    Parameters
    ----------
    tag_name : str
        Target element name (e.g. ``"div"``, ``"iframe"``, ``"a"``)
    attributes : dict, default = empty dict
        Target attributes; the composed class string lives under
        ``"class_name"``
    children : list of Node, default = empty list
        Ordered children (RenderHint or Text nodes, or directive content
        moved over from the replaced directive)
    hint_type : str or None, default = None
        Label of the pass that produced the hint (e.g. ``"callout"``,
        ``"embed_youtube"``, ``"link_preview"``)

    """

    tag_name: str
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    hint_type: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_render_hint``."""
        return visitor.visit_render_hint(self)


_CHILDREN_NODES = (Document, BlockQuote, DirectiveNode, RenderHint)
_CONTENT_NODES = (Heading, Paragraph, Emphasis, Strong, Link)


def get_child_list(node: Node) -> list[Node]:
    """Return the live, ordered child list of a node.

    Unlike :func:`get_node_children`, the returned list is the node's own
    list, so index assignment splices a replacement into the tree. Leaf
    nodes return a fresh empty list.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        The node's child list

    """
    if isinstance(node, _CHILDREN_NODES):
        return node.children
    if isinstance(node, _CONTENT_NODES):
        return node.content
    return []


def get_node_children(node: Node) -> list[Node]:
    """Get a copy of all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    return list(get_child_list(node))


__all__ = [
    "SourceLocation",
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "BlockQuote",
    "CodeBlock",
    "Text",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "Image",
    "DirectiveNode",
    "ContainerDirective",
    "LeafDirective",
    "TextDirective",
    "RenderHint",
    "get_child_list",
    "get_node_children",
]
