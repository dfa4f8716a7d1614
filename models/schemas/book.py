from marshmallow import Schema, fields, validate

from models.book import GENRES
from models.schemas.common import ISBN_PATTERN, ResourceSchema, validate_publication_year

TITLE_MSG = "Title is required and must be 1-200 characters"
AUTHOR_MSG = "Author is required and must be 1-100 characters"
ISBN_MSG = "ISBN must be 10 or 13 digits"
GENRE_MSG = "Invalid genre"
YEAR_MSG = "Publication year must be between 1000 and current year"
PAGES_MSG = "Pages must be between 1 and 10,000"


def _messages(text: str) -> dict:
    return {"required": text, "null": text, "invalid": text}


class BookSchema(ResourceSchema):
    """
    Input rules for a Book. Load with partial=True for updates: presence
    checks are skipped but every supplied field is validated the same way.
    """

    OPTIONAL_FIELDS = ("description", "available")
    UPDATE_MESSAGES = {
        TITLE_MSG: "Title must be 1-200 characters",
        AUTHOR_MSG: "Author must be 1-100 characters",
    }

    title = fields.String(
        required=True, validate=validate.Length(min=1, max=200, error=TITLE_MSG), error_messages=_messages(TITLE_MSG)
    )
    author = fields.String(
        required=True, validate=validate.Length(min=1, max=100, error=AUTHOR_MSG), error_messages=_messages(AUTHOR_MSG)
    )
    isbn = fields.String(
        required=True, validate=validate.Regexp(ISBN_PATTERN, error=ISBN_MSG), error_messages=_messages(ISBN_MSG)
    )
    genre = fields.String(
        required=True, validate=validate.OneOf(GENRES, error=GENRE_MSG), error_messages=_messages(GENRE_MSG)
    )
    publication_year = fields.Integer(
        required=True,
        strict=True,
        data_key="publicationYear",
        validate=validate_publication_year,
        error_messages=_messages(YEAR_MSG),
    )
    pages = fields.Integer(
        required=True,
        strict=True,
        validate=validate.Range(min=1, max=10000, error=PAGES_MSG),
        error_messages=_messages(PAGES_MSG),
    )
    description = fields.String(
        validate=validate.Length(max=1000, error="Description cannot exceed 1000 characters"),
        error_messages={"invalid": "Description must be a string"},
    )
    available = fields.Boolean(error_messages={"invalid": "Available must be a boolean"})


class BookOutSchema(Schema):
    id = fields.String()
    title = fields.String()
    author = fields.String()
    isbn = fields.String()
    genre = fields.String()
    publication_year = fields.Integer(data_key="publicationYear")
    pages = fields.Integer()
    description = fields.String(allow_none=True)
    available = fields.Boolean(allow_none=True)
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
