#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the heading identifier transform and slugify."""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from docdirectives.ast import BlockQuote, Code, Document, Emphasis, Heading, Link, Paragraph, Strong, Text
from docdirectives.transforms.heading_ids import HeadingIdTransform
from docdirectives.utils.text import slugify


@pytest.mark.unit
class TestSlugify:
    """Tests for the slug normalization function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Getting Started!", "getting-started"),
            ("API Reference (v2.0)", "api-reference-v20"),
            ("Café résumé", "cafe-resume"),
            ("  multiple   --  dashes ", "multiple-dashes"),
            ("snake_case_name", "snakecasename"),
            ("C++ & Rust", "c-rust"),
            ("Hello -", "hello"),
            ("", ""),
            ("!!!", ""),
        ],
    )
    def test_examples(self, text, expected):
        """Test representative headings."""
        assert slugify(text) == expected

    def test_custom_separator(self):
        """Test an alternative separator."""
        assert slugify("My Heading Title", separator="_") == "my_heading_title"

    @given(st.text(max_size=60))
    def test_output_is_url_safe(self, text):
        """Test slugs only contain lower-case ASCII letters, digits and single hyphens."""
        slug = slugify(text)

        assert re.fullmatch(r"([a-z0-9]+(-[a-z0-9]+)*)?", slug)

    @given(st.text(max_size=60))
    def test_idempotent(self, text):
        """Test slugifying a slug returns it unchanged."""
        slug = slugify(text)

        assert slugify(slug) == slug


@pytest.mark.unit
class TestHeadingIdTransform:
    """Tests for HeadingIdTransform."""

    def test_assigns_id(self):
        """Test a heading gets its slug as metadata id."""
        heading = Heading(level=1, content=[Text("Getting Started!")])
        doc = Document(children=[heading])

        HeadingIdTransform().transform(doc)

        assert heading.metadata["id"] == "getting-started"

    def test_heading_mutated_not_replaced(self):
        """Test the heading node and its children are kept."""
        content = [Text("Getting "), Emphasis(content=[Text("Started")])]
        heading = Heading(level=2, content=content)
        doc = Document(children=[heading])

        transform = HeadingIdTransform()
        transform.transform(doc)

        assert doc.children[0] is heading
        assert heading.content is content
        assert heading.level == 2
        assert transform.replacements == 0

    def test_text_from_all_descendants(self):
        """Test the id covers nested inline text in document order."""
        heading = Heading(
            level=1,
            content=[
                Strong(content=[Text("Install")]),
                Text(" the "),
                Code("cli"),
                Text(" via "),
                Link(url="https://pypi.org", content=[Text("PyPI")]),
            ],
        )
        HeadingIdTransform().transform(Document(children=[heading]))

        assert heading.metadata["id"] == "install-the-cli-via-pypi"

    def test_nested_headings_found(self):
        """Test headings inside containers are processed."""
        heading = Heading(level=3, content=[Text("Quoted")])
        HeadingIdTransform().transform(Document(children=[BlockQuote(children=[heading])]))

        assert heading.metadata["id"] == "quoted"

    def test_prefix(self):
        """Test the configured prefix is prepended."""
        heading = Heading(level=1, content=[Text("Intro")])
        HeadingIdTransform(id_prefix="doc-").transform(Document(children=[heading]))

        assert heading.metadata["id"] == "doc-intro"

    def test_duplicates_not_disambiguated(self):
        """Test identical headings receive identical ids."""
        first = Heading(level=2, content=[Text("Usage")])
        second = Heading(level=2, content=[Text("Usage")])
        HeadingIdTransform().transform(Document(children=[first, second]))

        assert first.metadata["id"] == second.metadata["id"] == "usage"

    def test_existing_metadata_kept(self):
        """Test other metadata entries survive."""
        heading = Heading(level=1, content=[Text("Intro")], metadata={"numbered": True})
        HeadingIdTransform().transform(Document(children=[heading]))

        assert heading.metadata == {"numbered": True, "id": "intro"}

    def test_running_twice_is_stable(self):
        """Test a second run produces the same id."""
        heading = Heading(level=1, content=[Text("Getting Started!")])
        doc = Document(children=[heading])
        transform = HeadingIdTransform()

        transform.transform(doc)
        transform.transform(doc)

        assert heading.metadata["id"] == "getting-started"

    def test_paragraphs_untouched(self):
        """Test non-heading nodes get no id."""
        paragraph = Paragraph(content=[Text("Body")])
        HeadingIdTransform().transform(Document(children=[paragraph]))

        assert "id" not in paragraph.metadata
