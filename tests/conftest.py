"""
Pytest configuration and shared fixtures.
"""
import time

import pytest

from api import create_app
from models import storage
from utils.security import SESSION_KEY


@pytest.fixture
def app():
    """Fresh app over an in-memory SQLite database."""
    app = create_app("testing")
    yield app
    storage.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def book_payload():
    return {
        "title": "Dune",
        "author": "F. Herbert",
        "isbn": "9780441013593",
        "genre": "Fantasy",
        "publicationYear": 1965,
        "pages": 412,
    }


@pytest.fixture
def author_payload():
    return {
        "fullname": "Ursula K. Le Guin",
        "country": "United States",
        "gender": "Female",
        "birthdate": "1929-10-21",
    }


@pytest.fixture
def create_book(client, book_payload):
    """Create a book from book_payload with overrides; returns the response body's data."""
    def _create(**overrides):
        resp = client.post("/books", json={**book_payload, **overrides})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _create


@pytest.fixture
def create_author(client, author_payload):
    def _create(**overrides):
        resp = client.post("/authors", json={**author_payload, **overrides})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _create


@pytest.fixture
def login(client):
    """Put a verified identity straight into the session cookie."""
    def _login(subject="google-123", name="Ada Reader", email="ada@example.com", authenticated_at=None):
        with client.session_transaction() as sess:
            sess[SESSION_KEY] = {
                "subject": subject,
                "name": name,
                "email": email,
                "picture": None,
                "authenticated_at": authenticated_at if authenticated_at is not None else time.time(),
            }

    return _login
