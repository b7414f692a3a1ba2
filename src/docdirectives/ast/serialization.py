#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

Parsers that run out of process hand their trees over as JSON, and the CLI
writes transformed trees back out the same way. Every node is an object with
a ``node_type`` field; the root additionally carries ``schema_version``.

Examples
--------
    >>> from docdirectives.ast import Document, LeafDirective, Text
    >>> from docdirectives.ast.serialization import ast_to_json, json_to_ast
    >>>
    >>> doc = Document(children=[
    ...     LeafDirective(name="embed", attributes={"id": "abc123"}, children=[Text(content="youtube")])
    ... ])
    >>> json_to_ast(ast_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
)
from docdirectives.constants import AST_SCHEMA_VERSION

logger = logging.getLogger(__name__)


def _add_metadata_and_source(result: dict[str, Any], node: Node) -> None:
    result["metadata"] = node.metadata
    if node.source_location:
        result["source_location"] = _serialize_source_location(node.source_location)


def _serialize_source_location(node: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "SourceLocation", "format": node.format}
    if node.line is not None:
        result["line"] = node.line
    if node.column is not None:
        result["column"] = node.column
    if node.metadata:
        result["metadata"] = node.metadata
    return result


def _serialize_children_node(node: Document | BlockQuote, node_type: str) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": node_type,
        "children": [ast_to_dict(child) for child in node.children],
    }
    _add_metadata_and_source(result, node)
    return result


def _serialize_inline_content_node(node: Paragraph | Emphasis | Strong, node_type: str) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": node_type,
        "content": [ast_to_dict(child) for child in node.content],
    }
    _add_metadata_and_source(result, node)
    return result


def _serialize_text_content_node(node: Text | Code, node_type: str) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": node_type, "content": node.content}
    _add_metadata_and_source(result, node)
    return result


def _serialize_heading(node: Heading) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "Heading",
        "level": node.level,
        "content": [ast_to_dict(child) for child in node.content],
    }
    _add_metadata_and_source(result, node)
    return result


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "CodeBlock", "content": node.content, "language": node.language}
    _add_metadata_and_source(result, node)
    return result


def _serialize_link(node: Link) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "Link",
        "url": node.url,
        "content": [ast_to_dict(child) for child in node.content],
        "title": node.title,
    }
    _add_metadata_and_source(result, node)
    return result


def _serialize_image(node: Image) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Image", "url": node.url, "alt_text": node.alt_text, "title": node.title}
    _add_metadata_and_source(result, node)
    return result


def _serialize_directive(node: DirectiveNode, node_type: str) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": node_type,
        "name": node.name,
        "attributes": dict(node.attributes),
        "children": [ast_to_dict(child) for child in node.children],
    }
    _add_metadata_and_source(result, node)
    return result


def _serialize_render_hint(node: RenderHint) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "RenderHint",
        "tag_name": node.tag_name,
        "attributes": dict(node.attributes),
        "children": [ast_to_dict(child) for child in node.children],
        "hint_type": node.hint_type,
    }
    _add_metadata_and_source(result, node)
    return result


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    SourceLocation: _serialize_source_location,
    Document: lambda n: _serialize_children_node(n, "Document"),
    BlockQuote: lambda n: _serialize_children_node(n, "BlockQuote"),
    Heading: _serialize_heading,
    Paragraph: lambda n: _serialize_inline_content_node(n, "Paragraph"),
    CodeBlock: _serialize_code_block,
    Text: lambda n: _serialize_text_content_node(n, "Text"),
    Emphasis: lambda n: _serialize_inline_content_node(n, "Emphasis"),
    Strong: lambda n: _serialize_inline_content_node(n, "Strong"),
    Code: lambda n: _serialize_text_content_node(n, "Code"),
    Link: _serialize_link,
    Image: _serialize_image,
    ContainerDirective: lambda n: _serialize_directive(n, "ContainerDirective"),
    LeafDirective: lambda n: _serialize_directive(n, "LeafDirective"),
    TextDirective: lambda n: _serialize_directive(n, "TextDirective"),
    RenderHint: _serialize_render_hint,
}


def ast_to_dict(node: Node | SourceLocation) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node or SourceLocation
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type has no serializer

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


# Helper functions for deserialization


def _deserialize_children(children_data: list[dict[str, Any]], strict_mode: bool) -> list[Node]:
    return [dict_to_ast(child, strict_mode=strict_mode) for child in children_data]  # type: ignore[misc]


def _deserialize_source_location(loc_data: dict[str, Any] | None) -> SourceLocation | None:
    if not loc_data:
        return None
    return SourceLocation(
        format=loc_data["format"],
        line=loc_data.get("line"),
        column=loc_data.get("column"),
        metadata=loc_data.get("metadata", {}),
    )


def _common(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "metadata": data.get("metadata", {}),
        "source_location": _deserialize_source_location(data.get("source_location")),
    }


def _deserialize_directive(cls: type[DirectiveNode]) -> Callable[[dict[str, Any], bool], Node]:
    def deserialize(data: dict[str, Any], strict_mode: bool) -> Node:
        attributes = data.get("attributes") or {}
        if not isinstance(attributes, dict):
            raise ValueError(f"Directive attributes must be an object, got {type(attributes).__name__}")
        return cls(
            name=data["name"],
            attributes={str(key): str(value) for key, value in attributes.items()},
            children=_deserialize_children(data.get("children", []), strict_mode),
            **_common(data),
        )

    return deserialize


# Dispatch table mapping node type strings to deserializer functions
_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Any]] = {
    "SourceLocation": lambda d, s: _deserialize_source_location(d),
    "Document": lambda d, s: Document(children=_deserialize_children(d.get("children", []), s), **_common(d)),
    "BlockQuote": lambda d, s: BlockQuote(children=_deserialize_children(d.get("children", []), s), **_common(d)),
    "Heading": lambda d, s: Heading(
        level=d["level"], content=_deserialize_children(d.get("content", []), s), **_common(d)
    ),
    "Paragraph": lambda d, s: Paragraph(content=_deserialize_children(d.get("content", []), s), **_common(d)),
    "CodeBlock": lambda d, s: CodeBlock(content=d["content"], language=d.get("language"), **_common(d)),
    "Text": lambda d, s: Text(content=d["content"], **_common(d)),
    "Emphasis": lambda d, s: Emphasis(content=_deserialize_children(d.get("content", []), s), **_common(d)),
    "Strong": lambda d, s: Strong(content=_deserialize_children(d.get("content", []), s), **_common(d)),
    "Code": lambda d, s: Code(content=d["content"], **_common(d)),
    "Link": lambda d, s: Link(
        url=d["url"], content=_deserialize_children(d.get("content", []), s), title=d.get("title"), **_common(d)
    ),
    "Image": lambda d, s: Image(url=d["url"], alt_text=d.get("alt_text", ""), title=d.get("title"), **_common(d)),
    "ContainerDirective": _deserialize_directive(ContainerDirective),
    "LeafDirective": _deserialize_directive(LeafDirective),
    "TextDirective": _deserialize_directive(TextDirective),
    "RenderHint": lambda d, s: RenderHint(
        tag_name=d["tag_name"],
        attributes=dict(d.get("attributes", {})),
        children=_deserialize_children(d.get("children", []), s),
        hint_type=d.get("hint_type"),
        **_common(d),
    ),
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node | SourceLocation:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, replace unknown nodes with an empty Text node.

    Returns
    -------
    Node or SourceLocation
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the dictionary contains an unknown node type and strict_mode is True

    """
    node_type = data.get("node_type")
    if not node_type:
        if strict_mode:
            raise ValueError("Dictionary must contain 'node_type' field")
        logger.warning("Dictionary missing 'node_type' field, skipping")
        return Text(content="")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if not deserializer:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type}")
        logger.warning(f"Unknown node type '{node_type}', skipping")
        return Text(content="")

    return deserializer(data, strict_mode)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string representation with schema version

    """
    node_dict = ast_to_dict(node)
    versioned_dict = {"schema_version": AST_SCHEMA_VERSION, **node_dict}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    A missing ``schema_version`` is treated as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, raise ValueError on unsupported schema versions
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the JSON describes an unsupported schema version or unknown nodes
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"AST JSON root must be an object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", None)
    if schema_version is None:
        schema_version = AST_SCHEMA_VERSION

    if validate_schema:
        if not isinstance(schema_version, int):
            raise ValueError(f"Schema version must be an integer, got {type(schema_version).__name__}")
        if schema_version != AST_SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of docdirectives supports schema version {AST_SCHEMA_VERSION} only."
            )
    elif schema_version != AST_SCHEMA_VERSION:
        logger.warning(
            f"Schema version {schema_version} differs from supported version {AST_SCHEMA_VERSION}. "
            f"Attempting to parse anyway (schema validation disabled)."
        )

    node = dict_to_ast(data, strict_mode=strict_mode)
    if not isinstance(node, Node):
        raise ValueError("AST JSON root must be a node, not a SourceLocation")
    return node


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
