#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/ast/__init__.py
"""Abstract Syntax Tree (AST) module for directive-aware documents.

The module consists of several components:

- nodes: AST node classes, including directive and render-hint nodes
- visitors: Visitor pattern base class and tree validation
- transforms: In-place transformer base class used by every directive pass
- serialization: JSON serialization and deserialization of trees
- utils: Text extraction helpers

Examples
--------
    >>> from docdirectives.ast import ContainerDirective, Document, Paragraph, Text
    >>>
    >>> doc = Document(children=[
    ...     ContainerDirective(
    ...         name="callout",
    ...         attributes={"title": "Heads up"},
    ...         children=[Text(content="warning"), Paragraph(content=[Text(content="Careful.")])],
    ...     )
    ... ])

"""

from __future__ import annotations

from docdirectives.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    ContainerDirective,
    DirectiveNode,
    Document,
    Emphasis,
    Heading,
    Image,
    LeafDirective,
    Link,
    Node,
    Paragraph,
    RenderHint,
    SourceLocation,
    Strong,
    Text,
    TextDirective,
    get_child_list,
    get_node_children,
)
from docdirectives.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.ast.utils import extract_text
from docdirectives.ast.visitors import NodeVisitor, ValidationVisitor

__all__ = [
    # Nodes
    "Node",
    "SourceLocation",
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
    # Visitors
    "NodeVisitor",
    "ValidationVisitor",
    "NodeTransformer",
    # Utilities
    "extract_text",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
