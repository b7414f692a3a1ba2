"""Pytest configuration and shared fixtures for the docdirectives test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from docdirectives.ast import (
    BlockQuote,
    ContainerDirective,
    Document,
    Emphasis,
    Heading,
    LeafDirective,
    Paragraph,
    Text,
)
from docdirectives.transforms import transform_registry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full pipeline and CLI tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty directory so no configuration file is discovered.

    Yields
    ------
    Path
        The working directory

    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOCDIRECTIVES_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    yield tmp_path


@pytest.fixture
def clean_registry():
    """Provide the registry and restore the built-ins afterwards."""
    transform_registry.clear()
    transform_registry._initialized = True
    yield transform_registry
    transform_registry.clear()


@pytest.fixture
def sample_document():
    """Create a document exercising every built-in transform.

    Returns
    -------
    Document
        Heading, callout, embed, link preview and an unrelated directive

    """
    return Document(
        children=[
            Heading(level=1, content=[Text("Getting "), Emphasis(content=[Text("Started")]), Text("!")]),
            ContainerDirective(
                name="callout",
                attributes={"title": "Heads up"},
                children=[
                    Paragraph(content=[Text("warning")]),
                    Paragraph(content=[Text("Back up your data first.")]),
                ],
            ),
            LeafDirective(name="embed", attributes={"id": "abc123"}, children=[Text("youtube")]),
            BlockQuote(
                children=[
                    LeafDirective(name="link-preview", attributes={"url": "https://www.example.org/some-page"}),
                ]
            ),
            LeafDirective(name="toc", attributes={"depth": "2"}),
            Heading(level=2, content=[Text("Next Steps")]),
        ]
    )
