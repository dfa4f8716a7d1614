import uuid

import pytest
from marshmallow import ValidationError

from models.base_model import is_valid_id
from models.schemas.author import AuthorSchema
from models.schemas.book import BookSchema
from models.schemas.common import flatten_errors


@pytest.fixture
def book_data():
    return {
        "title": "The Hound of the Baskervilles",
        "author": "Arthur Conan Doyle",
        "isbn": "9780141034324",
        "genre": "Mystery",
        "publicationYear": 1902,
        "pages": 256,
    }


def test_book_schema_maps_wire_names(book_data):
    data = BookSchema().load(book_data)
    assert data["publication_year"] == 1902
    assert "publicationYear" not in data


def test_book_schema_partial_skips_presence(book_data):
    assert BookSchema().load({"genre": "History"}, partial=True) == {"genre": "History"}


def test_book_schema_accepts_boolean_strings(book_data):
    assert BookSchema().load({**book_data, "available": "true"})["available"] is True


def test_author_schema_requires_every_field():
    with pytest.raises(ValidationError) as exc:
        AuthorSchema().load({})
    assert set(exc.value.messages) == {"fullname", "country", "gender", "birthdate"}


def test_flatten_errors_reports_each_message():
    details = flatten_errors({"title": ["a", "b"], "_schema": ["Invalid input type."]})
    assert details == [
        {"field": "title", "message": "a"},
        {"field": "title", "message": "b"},
        {"field": "body", "message": "Invalid input type."},
    ]


def test_is_valid_id():
    assert is_valid_id(str(uuid.uuid4()))
    assert not is_valid_id(str(uuid.uuid4()).upper())
    assert not is_valid_id("507f1f77bcf86cd799439011")
    assert not is_valid_id(None)
