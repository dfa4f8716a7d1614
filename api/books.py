from __future__ import annotations

from flask import Blueprint, request

from models.book import Book
from models.schemas.book import BookSchema, BookOutSchema
from api.resources import ResourceHandler, as_true_flag, success

bp = Blueprint("books", __name__)

# Schemas
book_out_schema = BookOutSchema()
books_out_schema = BookOutSchema(many=True)

handler = ResourceHandler(
    Book,
    BookSchema(),
    unique_field="isbn",
    filters={"genre": str, "available": as_true_flag},
    label="Book",
    conflict_message="ISBN already exists",
)


@bp.get("/books")
def list_books():
    """
    List books, optionally filtered by genre and availability
    ---
    tags:
      - Books
    parameters:
      - in: query
        name: genre
        type: string
        enum: [Mystery, Fantasy, Biography, History, Self-Help]
      - in: query
        name: available
        type: string
        description: "'true' selects available books, any other value unavailable ones"
    responses:
      200:
        description: All matching books (no pagination)
    """
    rows = handler.list(request.args)
    return success(books_out_schema.dump(rows), count=len(rows))


@bp.get("/books/<book_id>")
def get_book(book_id: str):
    """
    Get a single book by id
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: string
        required: true
    responses:
      200:
        description: Book found
      400:
        description: Invalid book ID
      404:
        description: Not found
    """
    return success(book_out_schema.dump(handler.get(book_id)))


@bp.post("/books")
def create_book():
    """
    Create a new book
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, author, isbn, genre, publicationYear, pages]
          properties:
            title: { type: string, maxLength: 200 }
            author: { type: string, maxLength: 100 }
            isbn: { type: string, description: "10 or 13 digits" }
            genre: { type: string, enum: [Mystery, Fantasy, Biography, History, Self-Help] }
            publicationYear: { type: integer, minimum: 1000 }
            pages: { type: integer, minimum: 1, maximum: 10000 }
            description: { type: string, maxLength: 1000 }
            available: { type: boolean }
    responses:
      201:
        description: Created
      400:
        description: Validation failed
      409:
        description: ISBN already exists
    """
    book = handler.create(request.get_json(silent=True))
    return success(book_out_schema.dump(book), message="Book created successfully", status=201)


@bp.put("/books/<book_id>")
def update_book(book_id: str):
    """
    Update a book (partial: only supplied fields change)
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: path
        name: book_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200:
        description: Updated
      400:
        description: Validation failed or invalid book ID
      404:
        description: Not found
      409:
        description: ISBN already exists
    """
    book = handler.update(book_id, request.get_json(silent=True))
    return success(book_out_schema.dump(book), message="Book updated successfully")


@bp.delete("/books/<book_id>")
def delete_book(book_id: str):
    """
    Delete a book
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: string
        required: true
    responses:
      200:
        description: Deleted
      400:
        description: Invalid book ID
      404:
        description: Not found
    """
    handler.delete(book_id)
    return success(message="Book deleted successfully")
