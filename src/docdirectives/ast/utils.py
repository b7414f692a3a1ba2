#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes

Examples
--------
    >>> from docdirectives.ast import Heading, Text, Emphasis
    >>> from docdirectives.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from docdirectives.ast.nodes import Code, CodeBlock, Image, Text, get_node_children

if TYPE_CHECKING:
    from docdirectives.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract the rendered plain text of a node or list of nodes.

    Text is concatenated in document order. Text, inline code and code
    blocks contribute their content; images contribute their alt text.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String placed between the text of sibling nodes. The default keeps
        the text exactly as written, which is what identifiers and
        classification labels are derived from.

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
        >>> extract_text([Text(content="a"), Text(content="b")], joiner=" ")
        'a b'

    """
    if isinstance(node_or_nodes, list):
        parts = [extract_text(node, joiner=joiner) for node in node_or_nodes]
        return joiner.join(part for part in parts if part)

    node = node_or_nodes
    if isinstance(node, (Text, Code, CodeBlock)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text

    return extract_text(get_node_children(node), joiner=joiner)


__all__ = [
    "extract_text",
]
