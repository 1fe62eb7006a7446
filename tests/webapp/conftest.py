"""Pytest fixtures for webapp tests."""

import json

import pytest

from guidebook.webapp.config import TestConfig


@pytest.fixture
def app_config(guides_dir, index_file):
    """Test config pointing at the temporary guides directory and index."""

    class GuideTestConfig(TestConfig):
        GUIDES_PATH = guides_dir
        GUIDE_INDEX_FILE = str(index_file)

    return GuideTestConfig


@pytest.fixture
def app(app_config):
    """Create test application."""
    from guidebook.webapp import create_app

    app = create_app(app_config)
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def empty_client(tmp_path, app_config):
    """Test client for an app with no registered guides."""
    from guidebook.webapp import create_app

    empty_index = tmp_path / "empty.json"
    empty_index.write_text(json.dumps([]), encoding="utf-8")

    class EmptyConfig(app_config):
        GUIDE_INDEX_FILE = str(empty_index)

    return create_app(EmptyConfig).test_client()
