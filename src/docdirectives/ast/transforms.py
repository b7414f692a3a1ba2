#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/ast/transforms.py
"""In-place AST transformation base class.

Transforms walk the tree once, depth-first and in document order. A visit_*
method returns either the node it was given (keep it, and descend into its
children) or a different node (splice it into the parent's child list at the
same index). A replacement is final for that position: the traversal does
not descend into it during the same pass, so the replaced node's original
children are never matched again as separate nodes.

Examples
--------
Upper-case every text node:

    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         node.content = node.content.upper()
    ...         return node
    >>>
    >>> UppercaseTransformer().transform(doc)

"""

from __future__ import annotations

import logging

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
from docdirectives.ast.visitors import NodeVisitor

logger = logging.getLogger(__name__)


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes in place.

    Subclasses override the visit_* methods for the node kinds they match.
    Every default visit_* method keeps the node and transforms its children,
    so a subclass only has to describe the nodes it cares about.

    Attributes
    ----------
    replacements : int
        Number of nodes spliced out of the tree during the last transform

    """

    replacements: int = 0

    def transform(self, node: Node) -> Node:
        """Transform a tree in place and return its root.

        Parameters
        ----------
        node : Node
            Root of the tree to transform (usually a Document)

        Returns
        -------
        Node
            The root, or its replacement if the root itself was matched

        """
        self.replacements = 0
        return self._transform_node(node)

    def _transform_node(self, node: Node) -> Node:
        result = node.accept(self)
        if not isinstance(result, Node):
            raise TypeError(
                f"{type(self).__name__}.visit_* returned {type(result).__name__} for "
                f"{type(node).__name__}; transforms must return a Node"
            )
        return result

    def _transform_children(self, children: list[Node]) -> None:
        """Transform a child list, splicing replacements in by index.

        Parameters
        ----------
        children : list of Node
            A live child list (mutated in place)

        """
        for index, child in enumerate(children):
            replacement = self._transform_node(child)
            if replacement is not child:
                children[index] = replacement
                self.replacements += 1
                logger.debug(
                    "%s replaced %s with %s at index %d",
                    type(self).__name__,
                    type(child).__name__,
                    type(replacement).__name__,
                    index,
                )

    def generic_visit(self, node: Node) -> Node:
        """Keep a node and transform its children."""
        self._transform_children(get_child_list(node))
        return node

    def visit_document(self, node: Document) -> Node:
        """Transform a Document node."""
        return self.generic_visit(node)

    def visit_heading(self, node: Heading) -> Node:
        """Transform a Heading node."""
        return self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> Node:
        """Transform a Paragraph node."""
        return self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> Node:
        """Transform a BlockQuote node."""
        return self.generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> Node:
        """Transform a CodeBlock node."""
        return node

    def visit_text(self, node: Text) -> Node:
        """Transform a Text node."""
        return node

    def visit_emphasis(self, node: Emphasis) -> Node:
        """Transform an Emphasis node."""
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> Node:
        """Transform a Strong node."""
        return self.generic_visit(node)

    def visit_code(self, node: Code) -> Node:
        """Transform a Code node."""
        return node

    def visit_link(self, node: Link) -> Node:
        """Transform a Link node."""
        return self.generic_visit(node)

    def visit_image(self, node: Image) -> Node:
        """Transform an Image node."""
        return node

    def visit_container_directive(self, node: ContainerDirective) -> Node:
        """Transform a ContainerDirective node."""
        return self.generic_visit(node)

    def visit_leaf_directive(self, node: LeafDirective) -> Node:
        """Transform a LeafDirective node."""
        return self.generic_visit(node)

    def visit_text_directive(self, node: TextDirective) -> Node:
        """Transform a TextDirective node."""
        return self.generic_visit(node)

    def visit_render_hint(self, node: RenderHint) -> Node:
        """Transform a RenderHint node."""
        return self.generic_visit(node)


__all__ = [
    "NodeTransformer",
]
