"""Shared fixtures for paracase tests."""

import pytest
from click.testing import CliRunner

from paracase.core.config import ServerConfig
from paracase.server import create_app


@pytest.fixture
def app():
    """Create a Flask app with default settings."""
    flask_app = create_app(ServerConfig())
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Return a test client for the app."""
    return app.test_client()


@pytest.fixture
def runner():
    """Return a click CLI runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """
    Fixture to write TOML config files.

    Returns a callable that writes the given text and returns the file path.
    """
    def write_config(content: str, name: str = 'config.toml'):
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path

    return write_config


@pytest.fixture
def article_html():
    """A fragment mixing paragraphs with other content."""
    return (
        '<article class="Post">'
        '<h1>Release Notes</h1>'
        '<p>Version <em>Two</em> is out.</p>'
        '<ul><li>Faster Parsing</li></ul>'
        '<p class="Note">Read the <a href="/Docs">Docs</a>.</p>'
        '</article>'
    )
