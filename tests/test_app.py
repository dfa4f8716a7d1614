import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from api.config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from models import storage
from models.book import Book


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_health_reports_database_outage(client, monkeypatch):
    def down():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(storage, "ping", down)
    resp = client.get("/health")
    assert resp.status_code == 503
    assert resp.get_json()["database"] == "unavailable"


def test_api_description_lists_resources(client):
    resp = client.get("/swagger.json")
    assert resp.status_code == 200
    paths = resp.get_json()["paths"]
    assert "/books" in paths
    assert "/authors/{author_id}" in paths


def test_api_docs_ui_is_served(client):
    assert client.get("/api-docs/").status_code == 200


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/shelves")
    assert resp.status_code == 404
    body = resp.get_json()
    assert body["error"] == "NOT_FOUND"
    assert body["status"] == 404


def test_wrong_method_uses_error_envelope(client):
    resp = client.patch("/books")
    assert resp.status_code == 405
    assert resp.get_json()["error"] == "METHOD_NOT_ALLOWED"


def test_persistence_failure_is_500_without_internals(client, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT * FROM books", {}, Exception("database is locked"))

    monkeypatch.setattr(storage, "find", broken)
    resp = client.get("/books")
    assert resp.status_code == 500
    assert resp.get_json() == {
        "error": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "status": 500,
    }


def test_storage_enforces_unique_isbn(app):
    with app.app_context():
        fields = dict(title="A", author="B", isbn="1234567890", genre="History", publication_year=2000, pages=10)
        storage.insert(Book(**fields))
        with pytest.raises(IntegrityError):
            storage.insert(Book(**fields))
        assert storage.count(Book) == 1


def test_storage_find_one_excludes_id(app):
    with app.app_context():
        book = storage.insert(
            Book(title="A", author="B", isbn="1234567890", genre="History", publication_year=2000, pages=10)
        )
        assert storage.find_one(Book, isbn="1234567890").id == book.id
        assert storage.find_one(Book, exclude_id=book.id, isbn="1234567890") is None


@pytest.mark.parametrize(
    "name, expected",
    [("testing", TestingConfig), ("prod", ProductionConfig), ("production", ProductionConfig), ("dev", DevelopmentConfig)],
)
def test_get_config(name, expected):
    assert get_config(name) is expected
