#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST nodes, traversal, validation and serialization."""

import json

import pytest

from docdirectives.ast import (
    BlockQuote,
    Code,
    ContainerDirective,
    Document,
    Emphasis,
    Heading,
    Image,
    LeafDirective,
    Paragraph,
    RenderHint,
    SourceLocation,
    Text,
    TextDirective,
    get_node_children,
)
from docdirectives.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from docdirectives.ast.transforms import NodeTransformer
from docdirectives.ast.utils import extract_text
from docdirectives.ast.visitors import ValidationVisitor
from docdirectives.constants import AST_SCHEMA_VERSION


class ReplaceTextDirective(NodeTransformer):
    """Replace every text directive with its name as plain text."""

    def visit_text_directive(self, node):
        return Text(node.name)


class ReturnsNone(NodeTransformer):
    """Broken transform returning None for paragraphs."""

    def visit_paragraph(self, node):
        return None


@pytest.mark.unit
class TestNodeTransformer:
    """Tests for in-place splicing."""

    def test_replacement_spliced_at_same_index(self):
        """Test a replacement takes the position of the original node."""
        paragraph = Paragraph(content=[Text("a "), TextDirective(name="kbd"), Text(" b")])
        doc = Document(children=[paragraph])

        transform = ReplaceTextDirective()
        transform.transform(doc)

        assert paragraph.content == [Text("a "), Text("kbd"), Text(" b")]
        assert transform.replacements == 1

    def test_siblings_keep_identity(self):
        """Test untouched siblings remain the same objects."""
        first = Text("a")
        last = Text("b")
        paragraph = Paragraph(content=[first, TextDirective(name="x"), last])

        ReplaceTextDirective().transform(Document(children=[paragraph]))

        assert paragraph.content[0] is first
        assert paragraph.content[2] is last

    def test_non_node_result_rejected(self):
        """Test visit methods must return a node."""
        with pytest.raises(TypeError, match="must return a Node"):
            ReturnsNone().transform(Document(children=[Paragraph(content=[Text("x")])]))


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_nested_inline(self):
        """Test text is concatenated in document order."""
        heading = Heading(level=1, content=[Text("Hello "), Emphasis(content=[Text("world")]), Code("!")])

        assert extract_text(heading) == "Hello world!"

    def test_image_alt_text(self):
        """Test images contribute their alt text."""
        assert extract_text(Paragraph(content=[Image(url="x.png", alt_text="logo")])) == "logo"

    def test_joiner(self):
        """Test a joiner between siblings."""
        assert extract_text([Text("a"), Text("b")], joiner=" ") == "a b"

    def test_empty(self):
        """Test nodes without text give an empty string."""
        assert extract_text(Paragraph(content=[])) == ""

    def test_directive_children(self):
        """Test directive and render hint children contribute text."""
        hint = RenderHint(tag_name="div", children=[LeafDirective(name="embed", children=[Text("youtube")])])

        assert extract_text(hint) == "youtube"


@pytest.mark.unit
class TestGetNodeChildren:
    """Tests for get_node_children."""

    def test_children_and_content(self):
        """Test block children and inline content are both returned in order."""
        first, second = Text("a"), Text("b")

        assert get_node_children(Paragraph(content=[first, second])) == [first, second]
        assert get_node_children(Document(children=[Paragraph(content=[])])) == [Paragraph(content=[])]

    def test_returns_copy(self):
        """Test mutating the result leaves the node untouched."""
        paragraph = Paragraph(content=[Text("a")])

        children = get_node_children(paragraph)
        children.append(Text("b"))

        assert paragraph.content == [Text("a")]

    def test_leaf_nodes(self):
        """Test leaf nodes have no children."""
        assert get_node_children(Text("a")) == []
        assert get_node_children(Image(url="x.png")) == []


@pytest.mark.unit
class TestValidationVisitor:
    """Tests for ValidationVisitor."""

    def test_valid_tree(self, sample_document):
        """Test a well-formed tree has no errors."""
        validator = ValidationVisitor(strict=False)
        sample_document.accept(validator)

        assert validator.errors == []

    def test_heading_level(self):
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError, match="Invalid heading level"):
            Document(children=[Heading(level=7, content=[])]).accept(ValidationVisitor())

    def test_leaf_directive_children(self):
        """Test a leaf directive holds at most one Text child."""
        doc = Document(children=[LeafDirective(name="embed", children=[Text("a"), Emphasis(content=[])])])
        validator = ValidationVisitor(strict=False)
        doc.accept(validator)

        assert any("at most 1 allowed" in error for error in validator.errors)
        assert any("child must be Text" in error for error in validator.errors)

    def test_directive_attribute_types(self):
        """Test directive attribute values must be strings."""
        doc = Document(children=[ContainerDirective(name="callout", attributes={"title": 3})])

        with pytest.raises(ValueError, match="must be a string"):
            doc.accept(ValidationVisitor())

    def test_empty_render_hint_tag(self):
        """Test render hints need a tag name."""
        validator = ValidationVisitor(strict=False)
        Document(children=[RenderHint(tag_name="")]).accept(validator)

        assert validator.errors == ["RenderHint has an empty tag name"]

    def test_shared_node(self):
        """Test a node instance in two positions is reported."""
        shared = Text("x")
        doc = Document(children=[Paragraph(content=[shared]), BlockQuote(children=[Paragraph(content=[shared])])])

        with pytest.raises(ValueError, match="more than one position"):
            doc.accept(ValidationVisitor())


@pytest.mark.unit
class TestSerialization:
    """Tests for JSON serialization."""

    def test_schema_version_written(self):
        """Test the root object carries the schema version."""
        data = json.loads(ast_to_json(Document()))

        assert data["schema_version"] == AST_SCHEMA_VERSION
        assert data["node_type"] == "Document"

    def test_directive_tree(self, sample_document):
        """Test directive trees survive a JSON round trip."""
        assert json_to_ast(ast_to_json(sample_document)) == sample_document

    def test_render_hint_attributes_kept(self):
        """Test non-string render hint attributes are preserved."""
        hint = RenderHint(
            tag_name="iframe",
            attributes={"src": "https://x", "allow_full_screen": True, "width": "560"},
            hint_type="embed_youtube",
            metadata={"variant": "info"},
        )

        restored = dict_to_ast(ast_to_dict(hint))

        assert restored.attributes["allow_full_screen"] is True
        assert restored.hint_type == "embed_youtube"
        assert restored.metadata == {"variant": "info"}

    def test_source_location(self):
        """Test source locations are serialized."""
        node = LeafDirective(name="embed", source_location=SourceLocation(format="markdown", line=3, column=1))

        assert dict_to_ast(ast_to_dict(node)).source_location == SourceLocation(format="markdown", line=3, column=1)

    def test_directive_attribute_values_coerced(self):
        """Test directive attributes are read back as strings."""
        node = dict_to_ast({"node_type": "LeafDirective", "name": "embed", "attributes": {"id": 42}})

        assert node.attributes == {"id": "42"}

    def test_directive_attributes_must_be_object(self):
        """Test a non-object attributes field is rejected."""
        with pytest.raises(ValueError, match="must be an object"):
            dict_to_ast({"node_type": "LeafDirective", "name": "embed", "attributes": ["id"]})

    def test_unknown_node_type(self):
        """Test unknown node types are rejected in strict mode."""
        with pytest.raises(ValueError, match="Unknown node type"):
            json_to_ast('{"node_type": "Table"}')

    def test_unknown_node_type_lenient(self):
        """Test unknown nodes become empty text when not strict."""
        doc = json_to_ast('{"node_type": "Document", "children": [{"node_type": "Table"}]}', strict_mode=False)

        assert doc.children == [Text("")]

    def test_unsupported_schema_version(self):
        """Test a future schema version is rejected."""
        with pytest.raises(ValueError, match="Unsupported schema version"):
            json_to_ast(json.dumps({"schema_version": AST_SCHEMA_VERSION + 1, "node_type": "Document"}))

    def test_missing_schema_version(self):
        """Test a missing schema version is accepted."""
        assert json_to_ast('{"node_type": "Document", "children": []}') == Document()

    def test_root_must_be_object(self):
        """Test a JSON array is not a tree."""
        with pytest.raises(ValueError, match="must be an object"):
            json_to_ast("[]")
