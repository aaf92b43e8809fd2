"""Tests for the HTTP endpoints."""

import pytest

from paracase.core.config import ServerConfig
from paracase.server import create_app


class TestHelloEndpoint:
    """Test the liveness endpoint."""

    def test_hello(self, client):
        """Test that GET / answers with a fixed body."""
        response = client.get('/')

        assert response.status_code == 200
        assert response.get_data(as_text=True) == "Hello, World!"


class TestTransformEndpoint:
    """Test POST /transform."""

    def test_uppercase(self, client):
        """Test upper-casing a paragraph."""
        response = client.post('/transform', json={'transform': 'uppercase', 'html': '<p>Hello world</p>'})

        assert response.status_code == 200
        assert response.get_data(as_text=True) == '<p>HELLO WORLD</p>'
        assert response.content_type == 'text/html; charset=utf-8'

    def test_lowercase(self, client):
        """Test lower-casing a paragraph."""
        response = client.post('/transform', json={'transform': 'lowercase', 'html': '<p>Hello WORLD</p>'})

        assert response.status_code == 200
        assert response.get_data(as_text=True) == '<p>hello world</p>'

    def test_multiple_paragraphs(self, client):
        """Test a fragment with paragraphs and other content."""
        response = client.post('/transform', json={
            'transform': 'uppercase',
            'html': '<div><p>First paragraph</p><span>Not a paragraph</span><p>Second paragraph</p></div>',
        })

        assert response.status_code == 200
        assert response.get_data(as_text=True) == (
            '<div><p>FIRST PARAGRAPH</p><span>Not a paragraph</span><p>SECOND PARAGRAPH</p></div>'
        )

    def test_nested_elements(self, client):
        """Test that nested element text is rewritten."""
        response = client.post('/transform', json={
            'transform': 'uppercase',
            'html': '<p>Text with <strong>bold</strong> and <em>italic</em> elements</p>',
        })

        assert response.status_code == 200
        assert response.get_data(as_text=True) == (
            '<p>TEXT WITH <strong>BOLD</strong> AND <em>ITALIC</em> ELEMENTS</p>'
        )

    def test_unicode_body(self, client):
        """Test that non-ASCII text round-trips through the endpoint."""
        response = client.post('/transform', json={'transform': 'uppercase', 'html': '<p>crème brûlée</p>'})

        assert response.get_data(as_text=True) == '<p>CRÈME BRÛLÉE</p>'


class TestTransformEndpointErrors:
    """Test that bad requests are answered with 400."""

    @pytest.mark.parametrize("html", ['', '   '])
    def test_empty_html(self, client, html):
        """Test that blank HTML is an invalid-html error."""
        response = client.post('/transform', json={'transform': 'uppercase', 'html': html})

        assert response.status_code == 400
        assert response.get_data(as_text=True).startswith('Invalid html:')
        assert 'empty' in response.get_data(as_text=True)

    def test_not_json(self, client):
        """Test that a body that is not JSON is rejected."""
        response = client.post('/transform', data='not json', content_type='application/json')

        assert response.status_code == 400
        assert response.get_data(as_text=True).startswith('Invalid request:')

    def test_missing_content_type(self, client):
        """Test that a non-JSON content type is rejected."""
        response = client.post('/transform', data='{"transform": "uppercase", "html": "<p>x</p>"}')

        assert response.status_code == 400
        assert response.get_data(as_text=True).startswith('Invalid request:')

    def test_json_array(self, client):
        """Test that the body must be a JSON object."""
        response = client.post('/transform', json=['uppercase', '<p>x</p>'])

        assert response.status_code == 400
        assert 'JSON object' in response.get_data(as_text=True)

    @pytest.mark.parametrize("payload, field", [
        ({'html': '<p>x</p>'}, 'transform'),
        ({'transform': 'uppercase'}, 'html'),
    ])
    def test_missing_field(self, client, payload, field):
        """Test that both fields are required."""
        response = client.post('/transform', json=payload)

        assert response.status_code == 400
        assert response.get_data(as_text=True) == f"Invalid request: missing field '{field}'"

    def test_wrong_field_type(self, client):
        """Test that html must be a string."""
        response = client.post('/transform', json={'transform': 'uppercase', 'html': 42})

        assert response.status_code == 400
        assert response.get_data(as_text=True) == "Invalid request: field 'html' must be a string"

    def test_unknown_transform(self, client):
        """Test that unknown directives are rejected."""
        response = client.post('/transform', json={'transform': 'titlecase', 'html': '<p>x</p>'})

        assert response.status_code == 400
        assert 'titlecase' in response.get_data(as_text=True)
        assert response.get_data(as_text=True).startswith('Invalid request:')

    def test_method_not_allowed(self, client):
        """Test that GET on the transform route is not served."""
        response = client.get('/transform')

        assert response.status_code == 405

    def test_body_too_large(self):
        """Test that the configured size limit is enforced."""
        app = create_app(ServerConfig(max_content_length=64))
        client = app.test_client()

        response = client.post('/transform', json={'transform': 'uppercase', 'html': '<p>' + 'x' * 200 + '</p>'})

        assert response.status_code == 413
