"""Shared pytest fixtures and markers for all tests."""

import json

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "webapp: marks webapp-specific tests"
    )


ALPHA_SOURCE = """# Alpha Guide

Intro with **bold** text.

- first
- second
"""


@pytest.fixture
def guides_dir(tmp_path):
    """Guides directory with one readable guide, one missing source and a companion."""
    path = tmp_path / "guides"
    path.mkdir()
    (path / "alpha.md").write_text(ALPHA_SOURCE, encoding="utf-8")
    (path / "alpha.pdf").write_bytes(b"%PDF-1.4 fake")
    return path


@pytest.fixture
def guide_entries():
    """Registry entries matching guides_dir, in JSON (camelCase) form."""
    return [
        {
            "id": "alpha",
            "title": "Alpha Guide",
            "description": "The first guide.",
            "sourceFile": "alpha.md",
            "companionFile": "alpha.pdf",
        },
        {
            "id": "beta",
            "title": "Beta Guide",
            "sourceFile": "beta.md",
        },
    ]


@pytest.fixture
def index_file(tmp_path, guide_entries):
    """JSON guide index written to disk."""
    path = tmp_path / "index.json"
    path.write_text(json.dumps(guide_entries), encoding="utf-8")
    return path


@pytest.fixture
def registry(guide_entries):
    """Registry built from guide_entries."""
    from guidebook.models.guide import Guide
    from guidebook.registry import GuideRegistry

    return GuideRegistry(Guide.model_validate(entry) for entry in guide_entries)
